# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitiva AES-GCM con nonce de 16 bytes y etiqueta truncada.
# --------------------------------------------------------------
"""Rutina de descifrado simétrico para los archivos multimedia cifrados."""

from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

TAG_LENGTH = 10


def aes_gcm_decrypt_truncated(
    key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra datos con AES-GCM aceptando una etiqueta truncada.

    `AESGCM` exige etiquetas de 16 bytes, por eso se usa la interfaz de bajo
    nivel `Cipher` con `min_tag_length`.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Vector de inicialización (16 bytes en este esquema).
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación truncada.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si la etiqueta no autentica.

    """

    decryptor = Cipher(
        algorithms.AES(key),
        modes.GCM(nonce, tag, min_tag_length=TAG_LENGTH),
    ).decryptor()
    if aad:
        decryptor.authenticate_additional_data(aad)
    return decryptor.update(ciphertext) + decryptor.finalize()
