# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES a partir de la media key del archivo.
# --------------------------------------------------------------
"""Derivación HMAC-SHA256 (extracción + un bloque de expansión)."""

import hashlib
import hmac

MEDIA_KEY_LENGTH = 32
ZERO_SALT = bytes(32)


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    return hmac.new(key, message, hashlib.sha256).digest()


def derive_expanded_key(media_key: bytes, info_string: str) -> bytes:
    """Deriva los 32 bytes de material de clave para una media key.

    Equivale a HKDF-SHA256 con salt de 32 ceros y longitud 32: basta con un
    único bloque de expansión.

    Args:
        media_key (bytes): Secreto de 32 bytes compartido para el archivo.
        info_string (str): Etiqueta propia de la categoría multimedia.

    Returns:
        bytes: Bloque expandido de 32 bytes usado como clave AES-256.

    Raises:
        ValueError: Si la media key no tiene exactamente 32 bytes.

    """

    if len(media_key) != MEDIA_KEY_LENGTH:
        raise ValueError(f"media key must be {MEDIA_KEY_LENGTH} bytes, got {len(media_key)}")
    info = info_string.encode("utf-8") + b"\x01"
    pseudo_random_key = hmac_sha256(ZERO_SALT, media_key)
    return hmac_sha256(pseudo_random_key, info)
