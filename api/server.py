# --------------------------------------------------------------
# File: server.py
# Description: Adaptador FastAPI que expone el descifrador por HTTP.
# --------------------------------------------------------------
"""Rutas HTTP: `POST /api/decrypt` y `GET /api/health`."""

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, File, Form, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from api.services import DecryptionOutcome, decrypt_upload, error_outcome, health_payload
from core import config

logger = logging.getLogger(__name__)


def _to_response(outcome: DecryptionOutcome) -> Response:
    if outcome.ok:
        return Response(content=outcome.body, status_code=200, headers=outcome.headers)
    return JSONResponse(status_code=outcome.status_code, content=outcome.report.to_json_dict())


def build_router(max_upload_bytes: int) -> APIRouter:
    """Construye el router con el límite de subida indicado."""

    router = APIRouter(prefix="/api")

    @router.post("/decrypt")
    async def decrypt(
        file: Optional[UploadFile] = File(None),
        media_key: Optional[str] = Form(None, alias="mediaKey"),
        media_type: Optional[str] = Form(None, alias="mediaType"),
    ) -> Response:
        file_bytes = None
        filename = None
        if file is not None:
            # Starlette ya recibió la subida completa; aquí solo se limita la copia en memoria.
            file_bytes = await file.read(max_upload_bytes + 1)
            filename = file.filename
            if len(file_bytes) > max_upload_bytes:
                logger.info("Subida rechazada por tamaño (> %d bytes)", max_upload_bytes)
                return _to_response(
                    error_outcome(
                        413, f"File exceeds the maximum upload size of {max_upload_bytes} bytes"
                    )
                )
        outcome = decrypt_upload(
            file_bytes, media_key, media_type, filename=filename, max_bytes=max_upload_bytes
        )
        return _to_response(outcome)

    @router.get("/health")
    async def health() -> dict:
        return health_payload()

    return router


def create_app(max_upload_bytes: Optional[int] = None) -> FastAPI:
    """Crea la aplicación FastAPI con CORS y las rutas del descifrador.

    Args:
        max_upload_bytes (Optional[int]): Límite de subida; por defecto el configurado.

    Returns:
        FastAPI: Aplicación lista para servirse con uvicorn.

    """

    limit = config.MAX_UPLOAD_BYTES if max_upload_bytes is None else max_upload_bytes
    app = FastAPI(title=config.SERVICE_NAME)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_methods=["POST", "OPTIONS", "GET"],
        allow_headers=["Content-Type"],
    )
    app.include_router(build_router(limit))
    return app


def main() -> None:
    import uvicorn

    from core.logging_config import configure_logging

    configure_logging(config.LOG_LEVEL)
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
