# --------------------------------------------------------------
# File: services.py
# Description: Traducción de los resultados del descifrador a respuestas de los adaptadores.
# --------------------------------------------------------------
"""Funciones de la capa de servicios compartidas por los adaptadores HTTP y Streamlit."""

import logging
from typing import Dict, Optional
from urllib.parse import quote

from pydantic import BaseModel, Field

from core import config
from core.decryptor import decrypt_media
from core.errors import MediaDecryptionError
from core.models import DecryptionReport

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: file, mediaKey, or mediaType"
INTERNAL_ERROR_MESSAGE = "Internal server error during decryption"


class DecryptionOutcome(BaseModel):
    """Respuesta lista para enviar, con bytes descifrados o un informe JSON.

    Attributes:
        status_code (int): Código HTTP asociado al resultado.
        headers (Dict[str, str]): Cabeceras a fijar en la respuesta.
        body (bytes): Contenido descifrado cuando el resultado es correcto.
        report (DecryptionReport): Informe de error o de éxito.

    """

    status_code: int
    report: DecryptionReport
    body: bytes = b""
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code == 200


def secure_name(name: str) -> str:
    """Normaliza el nombre de archivo para evitar caracteres problemáticos.

    Args:
        name (str): Nombre original del archivo proporcionado por el usuario.

    Returns:
        str: Nombre limpio y libre de rutas o caracteres inválidos.
    """
    bad = '<>:"/\\|?*'
    for ch in bad:
        name = name.replace(ch, "_")
    return name.strip().replace("..", "_")


def download_filename(original: Optional[str]) -> str:
    """Calcula el nombre de descarga del archivo descifrado."""

    cleaned = secure_name(original or "")
    if not cleaned:
        return config.DOWNLOAD_FILENAME
    return f"decrypted_{cleaned}"


def ascii_filename(name: str) -> str:
    """Sustituye por `_` los caracteres no ASCII y de control del nombre."""

    return "".join(ch if 32 <= ord(ch) < 127 else "_" for ch in name)


def content_disposition(original: Optional[str]) -> str:
    """Construye la cabecera `Content-Disposition` de la descarga.

    Las cabeceras HTTP se codifican en Latin-1, así que `filename` lleva una
    versión ASCII y `filename*` el nombre completo en UTF-8 (RFC 5987).

    Args:
        original (Optional[str]): Nombre original del archivo subido.

    Returns:
        str: Valor de la cabecera, siempre ASCII.
    """
    name = download_filename(original)
    fallback = ascii_filename(name)
    if fallback == name:
        return f'attachment; filename="{name}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(name, safe='')}"


def error_outcome(status_code: int, message: str) -> DecryptionOutcome:
    return DecryptionOutcome(
        status_code=status_code, report=DecryptionReport(success=False, error=message)
    )


def decrypt_upload(
    file_bytes: Optional[bytes],
    media_key: Optional[str],
    media_type: Optional[str],
    filename: Optional[str] = None,
    max_bytes: Optional[int] = None,
) -> DecryptionOutcome:
    """Ejecuta el descifrado sobre una subida y clasifica el resultado.

    Args:
        file_bytes (Optional[bytes]): Contenido del archivo subido.
        media_key (Optional[str]): Media key en base64; se ignoran espacios exteriores.
        media_type (Optional[str]): Categoría multimedia declarada; se ignoran espacios exteriores.
        filename (Optional[str]): Nombre original del archivo subido.
        max_bytes (Optional[int]): Límite de tamaño; por defecto `MAX_UPLOAD_BYTES`.

    Returns:
        DecryptionOutcome: 200 con los bytes en claro, 400 para errores de
        entrada o descifrado, 413 si la subida excede el límite y 500 para
        fallos internos.

    """

    limit = config.MAX_UPLOAD_BYTES if max_bytes is None else max_bytes
    media_key = (media_key or "").strip()
    media_type = (media_type or "").strip()
    if file_bytes is None or not media_key or not media_type:
        return error_outcome(400, MISSING_FIELDS_MESSAGE)
    if len(file_bytes) > limit:
        return error_outcome(413, f"File exceeds the maximum upload size of {limit} bytes")

    try:
        result = decrypt_media(file_bytes, media_key, media_type)
    except MediaDecryptionError as exc:
        logger.info("Descifrado rechazado (%s)", exc.kind.value)
        return error_outcome(400 if exc.is_client_error else 500, exc.message)
    except Exception:
        logger.exception("Error inesperado durante el descifrado")
        return error_outcome(500, INTERNAL_ERROR_MESSAGE)

    report = DecryptionReport(
        success=True,
        original_size=result.original_size,
        decrypted_size=result.decrypted_size,
        media_type=result.category.value,
    )
    headers = {
        "Content-Type": result.content_type,
        "Content-Disposition": content_disposition(filename),
        "Content-Length": str(result.decrypted_size),
    }
    return DecryptionOutcome(status_code=200, report=report, body=result.plaintext, headers=headers)


def health_payload() -> Dict[str, str]:
    """Devuelve el contenido estático de la comprobación de vida."""

    return {"status": "ok", "service": config.SERVICE_NAME}
