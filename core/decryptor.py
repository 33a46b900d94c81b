# --------------------------------------------------------------
# File: decryptor.py
# Description: Descifrado autenticado de archivos multimedia cifrados de extremo a extremo.
# --------------------------------------------------------------
"""Operación pura que transforma (archivo cifrado, media key, categoría) en claro.

El orden de validación es fijo: categoría, formato de la clave y tamaño del
archivo. Ninguna primitiva criptográfica se ejecuta antes de que las tres
comprobaciones hayan pasado, de modo que nunca se devuelve un claro parcial.
"""

import base64
import binascii
import logging
from typing import Union

from cryptography.exceptions import InvalidTag

from core.crypto_kdf import MEDIA_KEY_LENGTH, derive_expanded_key
from core.crypto_sym import aes_gcm_decrypt_truncated
from core.errors import DecryptionFailedError, InternalFaultError, InvalidKeyFormatError
from core.media_types import MediaCategory
from core.models import DecryptedMedia, EncryptedMediaPayload

__all__ = ["decode_media_key", "derive_media_key", "decrypt_media"]

logger = logging.getLogger(__name__)


def decode_media_key(media_key_b64: str) -> bytes:
    """Decodifica la media key en base64 estándar.

    Args:
        media_key_b64 (str): Clave codificada en base64 estándar, sin espacios.

    Returns:
        bytes: Media key de 32 bytes.

    Raises:
        InvalidKeyFormatError: Si la cadena no es base64 válido o no mide 32 bytes.

    """

    try:
        media_key = base64.b64decode(media_key_b64, validate=True)
    except (binascii.Error, ValueError, AttributeError):
        raise InvalidKeyFormatError() from None
    if len(media_key) != MEDIA_KEY_LENGTH:
        raise InvalidKeyFormatError()
    return media_key


def derive_media_key(media_key: bytes, category: Union[MediaCategory, str]) -> bytes:
    """Devuelve la clave AES-256 derivada para una media key y categoría."""

    category = MediaCategory.parse(category)
    return derive_expanded_key(media_key, category.info_string)[:32]


def decrypt_media(
    payload: bytes, media_key_b64: str, category: Union[MediaCategory, str]
) -> DecryptedMedia:
    """Descifra un archivo multimedia cifrado.

    Args:
        payload (bytes): Archivo cifrado completo (IV + ciphertext + etiqueta).
        media_key_b64 (str): Media key del archivo en base64.
        category (Union[MediaCategory, str]): Categoría multimedia declarada.

    Returns:
        DecryptedMedia: Contenido en claro junto con su categoría y tamaños.

    Raises:
        InvalidCategoryError: Si la categoría no es una de las admitidas.
        InvalidKeyFormatError: Si la media key no es base64 de 32 bytes.
        PayloadTooSmallError: Si el archivo mide menos de 26 bytes.
        DecryptionFailedError: Si la etiqueta no autentica el contenido.
        InternalFaultError: Ante cualquier fallo inesperado de las primitivas.

    """

    media_category = MediaCategory.parse(category)
    media_key = decode_media_key(media_key_b64)
    parts = EncryptedMediaPayload.from_bytes(payload)

    try:
        aes_key = derive_media_key(media_key, media_category)
        plaintext = aes_gcm_decrypt_truncated(aes_key, parts.iv, parts.ciphertext, parts.tag)
    except InvalidTag:
        logger.info(
            "Autenticación fallida para %s de %d bytes", media_category.value, len(payload)
        )
        raise DecryptionFailedError() from None
    except Exception as exc:
        logger.exception("Fallo inesperado al descifrar %s", media_category.value)
        raise InternalFaultError() from exc

    logger.debug(
        "Descifrado %s: %d -> %d bytes", media_category.value, len(payload), len(plaintext)
    )
    return DecryptedMedia(
        plaintext=plaintext, category=media_category, original_size=len(payload)
    )
