from ferrofix.json.config import Config


def test_config_doesnt_pretty_print_by_default():
    assert Config().pretty_print is False


def test_config_pretty_print_behavior_can_be_changed():
    config = Config()
    config.pretty_print = True
    assert config.pretty_print is True
    config.pretty_print = False
    assert config.pretty_print is False


def test_config_accepts_pretty_print_at_construction():
    assert Config(pretty_print=True).pretty_print is True


def test_configs_compare_by_value():
    assert Config() == Config(pretty_print=False)
    assert Config(pretty_print=True) != Config()