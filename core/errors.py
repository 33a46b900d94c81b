# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores del descifrado de archivos multimedia.
# --------------------------------------------------------------
"""Excepciones tipadas que clasifican cada fallo del descifrado."""

from enum import Enum

__all__ = [
    "ErrorKind",
    "MediaDecryptionError",
    "InvalidCategoryError",
    "InvalidKeyFormatError",
    "PayloadTooSmallError",
    "DecryptionFailedError",
    "InternalFaultError",
]


class ErrorKind(str, Enum):
    """Clases de fallo que el descifrador puede devolver al llamante."""

    INVALID_CATEGORY = "invalid_category"
    INVALID_KEY_FORMAT = "invalid_key_format"
    PAYLOAD_TOO_SMALL = "payload_too_small"
    DECRYPTION_FAILED = "decryption_failed"
    INTERNAL_FAULT = "internal_fault"


class MediaDecryptionError(Exception):
    """Error base del descifrador.

    Attributes:
        kind (ErrorKind): Clasificación del fallo.
        message (str): Texto apto para mostrar al usuario final.

    """

    kind: ErrorKind = ErrorKind.INTERNAL_FAULT
    default_message = "Internal server error during decryption"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        """Indica si el fallo se debe a la entrada y no a un defecto interno."""

        return self.kind is not ErrorKind.INTERNAL_FAULT


class InvalidCategoryError(MediaDecryptionError):
    kind = ErrorKind.INVALID_CATEGORY
    default_message = "Invalid media type. Must be: audio, video, image, voice, or document"


class InvalidKeyFormatError(MediaDecryptionError):
    kind = ErrorKind.INVALID_KEY_FORMAT
    default_message = "Invalid media key format. Must be a base64 encoded 32-byte key."


class PayloadTooSmallError(MediaDecryptionError):
    kind = ErrorKind.PAYLOAD_TOO_SMALL
    default_message = "File too small to be a valid encrypted WhatsApp media file"


# SECURITY: no distingue clave errónea, categoría errónea y archivo corrupto.
class DecryptionFailedError(MediaDecryptionError):
    kind = ErrorKind.DECRYPTION_FAILED
    default_message = "Decryption failed. Invalid media key or corrupted file."


class InternalFaultError(MediaDecryptionError):
    kind = ErrorKind.INTERNAL_FAULT
    default_message = "Cryptographic operation failed"
