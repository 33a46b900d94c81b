# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from core import config
from core.logging_config import configure_logging

configure_logging(config.LOG_LEVEL)

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Media Decryptor", page_icon="🔓", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔓 WhatsApp Media Decryptor")
st.write(
    "Descifra archivos multimedia cifrados de extremo a extremo a partir de su "
    "media key (base64) y su categoría: imagen, vídeo, audio, nota de voz o documento."
)
st.info("Ve a **Descifrar multimedia** para subir el archivo `.enc` y su media key.")
st.caption("Ningún archivo ni clave se guarda: todo se procesa en memoria.")
