# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas de la derivación de la clave AES a partir de la media key.
# --------------------------------------------------------------

import os

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from core.crypto_kdf import derive_expanded_key
from core.decryptor import derive_media_key
from core.media_types import MediaCategory


@pytest.mark.parametrize("category", list(MediaCategory))
def test_derivation_matches_hkdf_sha256(category):
    """Comprueba que la derivación coincida con HKDF-SHA256 (salt nula, 32 bytes).

    Args:
        category (MediaCategory): Categoría bajo prueba.

    Returns:
        None: Las aserciones comparan ambas derivaciones.
    """
    media_key = os.urandom(32)
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=32,
        salt=b"\x00" * 32,
        info=category.info_string.encode("utf-8"),
    )
    assert derive_media_key(media_key, category) == hkdf.derive(media_key)


def test_audio_and_voice_share_derivation():
    """Verifica que audio y voice deriven exactamente la misma clave.

    Returns:
        None: Las aserciones comparan las claves derivadas.
    """
    media_key = os.urandom(32)
    assert derive_media_key(media_key, "audio") == derive_media_key(media_key, "voice")


def test_other_categories_are_domain_separated():
    """Garantiza que las demás categorías produzcan claves distintas entre sí.

    Returns:
        None: Se comprueba la cardinalidad del conjunto de claves.
    """
    media_key = os.urandom(32)
    keys = {derive_media_key(media_key, c) for c in ("image", "video", "audio", "document")}
    assert len(keys) == 4


def test_derivation_is_deterministic_and_32_bytes():
    """Comprueba que la derivación sea determinista y de 256 bits.

    Returns:
        None: Las aserciones validan longitud y repetibilidad.
    """
    media_key = bytes(32)
    first = derive_media_key(media_key, "image")
    assert len(first) == 32
    assert derive_media_key(media_key, "image") == first


@pytest.mark.parametrize("length", [0, 31, 33])
def test_derive_expanded_key_rejects_wrong_length(length):
    """Valida que la expansión rechace media keys de longitud distinta a 32.

    Args:
        length (int): Longitud de la media key inválida.

    Returns:
        None: Se espera un ValueError.
    """
    with pytest.raises(ValueError):
        derive_expanded_key(b"\x00" * length, "WhatsApp Image Keys")
