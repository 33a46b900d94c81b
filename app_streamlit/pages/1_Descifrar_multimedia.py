# --------------------------------------------------------------
# File: 1_Descifrar_multimedia.py
# Description: Permite subir un archivo multimedia cifrado y descargar su contenido en claro.
# --------------------------------------------------------------

import hashlib

import streamlit as st

from api.services import decrypt_upload, download_filename
from core import config
from core.media_types import MediaCategory

_LABELS = {
    MediaCategory.IMAGE: "Imagen",
    MediaCategory.VIDEO: "Vídeo",
    MediaCategory.AUDIO: "Audio",
    MediaCategory.VOICE: "Nota de voz",
    MediaCategory.DOCUMENT: "Documento",
}

# Presenta el título de la sección dedicada al descifrado.
st.title("🔓 Descifrar multimedia")

f = st.file_uploader("Selecciona el archivo cifrado", type=None)
media_key = st.text_input("Media key (base64)", type="password")
category = st.selectbox(
    "Tipo de contenido",
    list(MediaCategory),
    format_func=lambda c: _LABELS[c],
)

if f and f.size > config.MAX_UPLOAD_BYTES:
    st.error(f"El archivo supera el límite de {config.MAX_UPLOAD_BYTES // (1024 * 1024)} MiB.")
    st.stop()

if f and st.button("Descifrar"):
    outcome = decrypt_upload(f.read(), media_key, category.value, filename=f.name)

    if not outcome.ok:
        st.error(outcome.report.error)
        st.stop()

    st.success("Archivo descifrado correctamente.")
    st.code(
        f"AES-256-GCM | nonce=128 bits | tag=80 bits\n"
        f"cifrado={outcome.report.original_size} bytes | claro={outcome.report.decrypted_size} bytes"
    )

    st.download_button(
        "⬇️ Descargar archivo descifrado",
        data=outcome.body,
        file_name=download_filename(f.name),
        mime=outcome.headers["Content-Type"],
    )
    if category is MediaCategory.IMAGE:
        st.image(outcome.body)
    elif category in (MediaCategory.AUDIO, MediaCategory.VOICE):
        st.audio(outcome.body, format=outcome.headers["Content-Type"])
    elif category is MediaCategory.VIDEO:
        st.video(outcome.body)

    st.caption(f"SHA-256 del claro: {hashlib.sha256(outcome.body).hexdigest()}")
