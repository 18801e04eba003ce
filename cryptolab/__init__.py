"""Teaching toolkit: AES-128-CBC with PKCS#7 padding, a Caesar cipher and letter-frequency analysis."""

__version__ = "0.1.0"
__all__ = ["tables", "keyschedule", "aes", "aes_demo", "caesar", "frequency"]