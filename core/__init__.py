# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del descifrador de archivos multimedia.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_kdf",
    "crypto_sym",
    "decryptor",
    "errors",
    "logging_config",
    "media_types",
    "models",
]
