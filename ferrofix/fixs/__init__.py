"""FIX-over-TLS (FIXS) ciphersuites and TLS context settings."""