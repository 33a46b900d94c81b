# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para generar archivos multimedia cifrados de prueba.
# --------------------------------------------------------------

import base64
import os
from typing import Callable

import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from core.decryptor import derive_media_key


def encrypt_media(media_key: bytes, category: str, plaintext: bytes, iv: bytes = None) -> bytes:
    """Cifra un contenido con el proceso directo del esquema (solo para fixtures).

    Args:
        media_key (bytes): Media key de 32 bytes.
        category (str): Categoría multimedia usada para derivar la clave.
        plaintext (bytes): Contenido en claro.
        iv (bytes): IV de 16 bytes; aleatorio si no se indica.

    Returns:
        bytes: Archivo cifrado con el formato IV + ciphertext + etiqueta de 10 bytes.
    """
    iv = iv or os.urandom(16)
    encryptor = Cipher(algorithms.AES(derive_media_key(media_key, category)), modes.GCM(iv)).encryptor()
    ciphertext = encryptor.update(plaintext) + encryptor.finalize()
    return iv + ciphertext + encryptor.tag[:10]


@pytest.fixture
def media_key() -> bytes:
    """Media key aleatoria de 32 bytes para cada prueba."""
    return os.urandom(32)


@pytest.fixture
def media_key_b64(media_key) -> str:
    """Media key de la prueba codificada en base64 estándar."""
    return base64.b64encode(media_key).decode("ascii")


@pytest.fixture
def make_payload(media_key) -> Callable[..., bytes]:
    """Devuelve un generador de archivos cifrados con la media key de la prueba."""

    def _make(category: str, plaintext: bytes) -> bytes:
        return encrypt_media(media_key, category, plaintext)

    return _make
