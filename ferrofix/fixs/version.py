"""FIX-over-TLS (FIXS) versions and their recommended TLS settings."""

from __future__ import annotations

import enum
import ssl
import warnings

from ferrofix.fixs.iana2openssl import to_openssl

_V1_DRAFT_RECOMMENDED_CIPHERSUITES = (
    "TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256",
    "TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384",
    "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA",
    "TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA",
    "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256",
    "TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA384",
    "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256",
    "TLS_DHE_RSA_WITH_AES_128_GCM_SHA256",
    "TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384",
    "TLS_DHE_RSA_WITH_AES_256_GCM_SHA384",
    "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA",
    "TLS_DHE_RSA_WITH_AES_128_CBC_SHA",
    "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA",
    "TLS_DHE_RSA_WITH_AES_256_CBC_SHA",
    "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256",
    "TLS_DHE_RSA_WITH_AES_128_CBC_SHA256",
    "TLS_DHE_RSA_WITH_AES_256_CBC_SHA256",
    "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA384",
)

_V1_DRAFT_RECOMMENDED_CIPHERSUITES_PSK_ONLY = (
    "TLS_DHE_PSK_WITH_AES_128_GCM_SHA256",
    "TLS_DHE_PSK_WITH_AES_256_GCM_SHA384",
    "TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA",
    "TLS_DHE_PSK_WITH_AES_128_CBC_SHA",
    "TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA",
    "TLS_DHE_PSK_WITH_AES_256_CBC_SHA",
    "TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA256",
    "TLS_DHE_PSK_WITH_AES_128_CBC_SHA256",
    "TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA384",
    "TLS_DHE_PSK_WITH_AES_256_CBC_SHA384",
)


class Version(enum.Enum):
    """A version of FIX-over-TLS."""

    V1_DRAFT = "v1_draft"

    def recommended_cs_iana(self, psk: bool) -> list[str]:
        """The suggested ciphersuites, in IANA notation."""
        suites = list(_V1_DRAFT_RECOMMENDED_CIPHERSUITES)
        if psk:
            suites.extend(_V1_DRAFT_RECOMMENDED_CIPHERSUITES_PSK_ONLY)
        return suites

    def recommended_cs_openssl(self, psk: bool) -> list[str]:
        """The suggested ciphersuites, in OpenSSL notation.

        Raises ``KeyError`` for a ciphersuite without a known OpenSSL name.
        """
        return [to_openssl(name) for name in self.recommended_cs_iana(psk)]

    def _configure(self, context: ssl.SSLContext) -> ssl.SSLContext:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            context.minimum_version = ssl.TLSVersion.TLSv1_1
            context.maximum_version = ssl.TLSVersion.TLSv1_2
        context.options |= ssl.OP_NO_COMPRESSION | ssl.OP_NO_TLSv1_3
        context.set_ciphers(":".join(self.recommended_cs_openssl(False)))
        return context

    def recommended_connector_context(self) -> ssl.SSLContext:
        """A client-side TLS context with the recommended settings."""
        return self._configure(ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT))

    def recommended_acceptor_context(self) -> ssl.SSLContext:
        """A server-side TLS context with the recommended settings."""
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
        context.options |= ssl.OP_CIPHER_SERVER_PREFERENCE
        return self._configure(context)