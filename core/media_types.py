# --------------------------------------------------------------
# File: media_types.py
# Description: Categorías multimedia admitidas y sus parámetros asociados.
# --------------------------------------------------------------
"""Enumeración cerrada de categorías multimedia y su tabla de parámetros."""

from enum import Enum
from typing import Dict, NamedTuple

from core.errors import InvalidCategoryError

__all__ = ["MediaCategory", "CategoryParams"]


class CategoryParams(NamedTuple):
    info_string: str
    mime_type: str


class MediaCategory(str, Enum):
    """Categorías multimedia reconocidas por el esquema de cifrado."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    VOICE = "voice"
    DOCUMENT = "document"

    @classmethod
    def parse(cls, value: str) -> "MediaCategory":
        """Convierte la cadena recibida en una categoría válida.

        Args:
            value (str): Nombre de la categoría tal como lo envía el cliente.

        Returns:
            MediaCategory: Miembro correspondiente de la enumeración.

        Raises:
            InvalidCategoryError: Si la cadena no pertenece al conjunto admitido.

        """

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidCategoryError() from None

    @property
    def info_string(self) -> str:
        """Etiqueta de separación de dominio usada al derivar la clave."""

        return _PARAMS[self].info_string

    @property
    def mime_type(self) -> str:
        """Tipo MIME con el que se entrega el contenido descifrado."""

        return _PARAMS[self].mime_type


# audio y voice comparten etiqueta: ambas categorías derivan la misma clave.
_PARAMS: Dict[MediaCategory, CategoryParams] = {
    MediaCategory.IMAGE: CategoryParams("WhatsApp Image Keys", "image/jpeg"),
    MediaCategory.VIDEO: CategoryParams("WhatsApp Video Keys", "video/mp4"),
    MediaCategory.AUDIO: CategoryParams("WhatsApp Audio Keys", "audio/ogg"),
    MediaCategory.VOICE: CategoryParams("WhatsApp Audio Keys", "audio/ogg"),
    MediaCategory.DOCUMENT: CategoryParams("WhatsApp Document Keys", "application/octet-stream"),
}
