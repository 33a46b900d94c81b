# --------------------------------------------------------------
# File: __init__.py
# Description: Adaptadores que exponen el descifrador por HTTP y Streamlit.
# --------------------------------------------------------------
"""Inicializa el paquete `api`."""

__all__ = ["server", "services"]
