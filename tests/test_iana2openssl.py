import pytest

from ferrofix.fixs.iana2openssl import IANA_TO_OPENSSL, to_openssl


@pytest.mark.parametrize(
    "iana, openssl",
    [
        ("TLS_DHE_RSA_WITH_AES_128_GCM_SHA256", "DHE-RSA-AES128-GCM-SHA256"),
        ("TLS_RSA_WITH_NULL_MD5", "NULL-MD5"),
        ("TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA384", "ECDHE-RSA-AES256-SHA384"),
        ("TLS_EMPTY_RENEGOTIATION_INFO_SCSV", "TLS_FALLBACK_SCSV"),
        ("TLS_AES_128_GCM_SHA256", "TLS_AES_128_GCM_SHA256"),
        ("SSL_CK_NULL", "NULL"),
        ("TLS_DH_anon_WITH_AES_256_GCM_SHA384", "ADH-AES256-GCM-SHA384"),
    ],
)
def test_known_ciphersuites(iana, openssl):
    assert to_openssl(iana) == openssl


def test_unknown_ciphersuite_raises_key_error():
    with pytest.raises(KeyError):
        to_openssl("TLS_NOT_A_REAL_CIPHERSUITE")


def test_lookup_is_case_sensitive():
    with pytest.raises(KeyError):
        to_openssl("tls_rsa_with_null_md5")


def test_to_openssl_agrees_with_mapping():
    for iana, openssl in IANA_TO_OPENSSL.items():
        assert to_openssl(iana) == openssl


def test_all_names_have_expected_prefixes_and_values():
    for iana, openssl in IANA_TO_OPENSSL.items():
        assert iana.startswith(("TLS_", "SSL_CK_"))
        assert openssl
        assert " " not in openssl


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        IANA_TO_OPENSSL["TLS_RSA_WITH_NULL_MD5"] = "OTHER"  # type: ignore[index]
    assert to_openssl("TLS_RSA_WITH_NULL_MD5") == "NULL-MD5"


def test_distinct_iana_names_may_share_openssl_name():
    assert to_openssl("SSL_CK_RC4_128_WITH_MD5") == to_openssl(
        "TLS_RSA_WITH_RC4_128_MD5"
    )