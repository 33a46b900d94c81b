# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del descifrado de archivos multimedia.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan las entradas y salidas del descifrador."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.crypto_sym import TAG_LENGTH
from core.errors import PayloadTooSmallError
from core.media_types import MediaCategory

IV_LENGTH = 16
MIN_PAYLOAD_LENGTH = IV_LENGTH + TAG_LENGTH


class EncryptedMediaPayload(BaseModel):
    """Estructura interna de un archivo multimedia cifrado.

    Attributes:
        iv (bytes): Vector de inicialización de 16 bytes.
        ciphertext (bytes): Datos cifrados, posiblemente vacíos.
        tag (bytes): Etiqueta de autenticación truncada a 10 bytes.

    """

    iv: bytes
    ciphertext: bytes
    tag: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "EncryptedMediaPayload":
        """Separa el archivo cifrado en IV, ciphertext y etiqueta.

        Args:
            data (bytes): Contenido completo del archivo cifrado.

        Returns:
            EncryptedMediaPayload: Componentes del archivo.

        Raises:
            PayloadTooSmallError: Si el archivo no alcanza los 26 bytes mínimos.

        """

        if len(data) < MIN_PAYLOAD_LENGTH:
            raise PayloadTooSmallError()
        end = len(data) - TAG_LENGTH
        return cls(iv=data[:IV_LENGTH], ciphertext=data[IV_LENGTH:end], tag=data[end:])

    @property
    def size(self) -> int:
        return len(self.iv) + len(self.ciphertext) + len(self.tag)


class DecryptedMedia(BaseModel):
    """Resultado de un descifrado correcto.

    Attributes:
        plaintext (bytes): Contenido en claro.
        category (MediaCategory): Categoría declarada que determinó la clave.
        original_size (int): Tamaño en bytes del archivo cifrado.

    """

    plaintext: bytes
    category: MediaCategory
    original_size: int

    @property
    def decrypted_size(self) -> int:
        return len(self.plaintext)

    @property
    def content_type(self) -> str:
        return self.category.mime_type


class DecryptionReport(BaseModel):
    """Cuerpo JSON devuelto por los adaptadores cuando no se entregan bytes."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    original_size: Optional[int] = Field(default=None, alias="originalSize")
    decrypted_size: Optional[int] = Field(default=None, alias="decryptedSize")
    media_type: Optional[str] = Field(default=None, alias="mediaType")
    error: Optional[str] = None

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
