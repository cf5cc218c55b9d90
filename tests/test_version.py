import ssl

import pytest

from ferrofix.fixs.version import Version


def test_iana_list_contains_documented_suite():
    suites = Version.V1_DRAFT.recommended_cs_iana(False)
    assert "TLS_DHE_RSA_WITH_AES_128_GCM_SHA256" in suites
    assert len(suites) == 18


def test_psk_list_extends_plain_list():
    plain = Version.V1_DRAFT.recommended_cs_iana(False)
    psk = Version.V1_DRAFT.recommended_cs_iana(True)
    assert psk[: len(plain)] == plain
    assert len(psk) == 28
    assert "TLS_DHE_PSK_WITH_AES_128_GCM_SHA256" in psk


def test_openssl_list_contains_documented_suite():
    suites = Version.V1_DRAFT.recommended_cs_openssl(False)
    assert "DHE-RSA-AES128-GCM-SHA256" in suites
    assert suites[0] == "ECDHE-ECDSA-AES128-GCM-SHA256"
    assert len(suites) == 18


def test_openssl_list_with_psk_has_unmapped_suites():
    with pytest.raises(KeyError):
        Version.V1_DRAFT.recommended_cs_openssl(True)


def test_connector_context_is_ok():
    context = Version.V1_DRAFT.recommended_connector_context()
    assert context.maximum_version == ssl.TLSVersion.TLSv1_2
    assert context.options & ssl.OP_NO_COMPRESSION
    assert context.options & ssl.OP_NO_TLSv1_3
    recommended = set(Version.V1_DRAFT.recommended_cs_openssl(False))
    assert any(c["name"] in recommended for c in context.get_ciphers())


def test_acceptor_context_is_ok():
    context = Version.V1_DRAFT.recommended_acceptor_context()
    assert context.maximum_version == ssl.TLSVersion.TLSv1_2
    assert context.options & ssl.OP_CIPHER_SERVER_PREFERENCE
    assert context.options & ssl.OP_NO_TLSv1_3