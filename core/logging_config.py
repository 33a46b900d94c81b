# --------------------------------------------------------------
# File: logging_config.py
# Description: Configuración centralizada del logging de la aplicación.
# --------------------------------------------------------------
"""Configura el logging estándar para los adaptadores HTTP y Streamlit.

Los módulos obtienen su logger con `logging.getLogger(__name__)`; nunca se
registran claves, media keys ni contenido en claro.
"""

import logging

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Instala un único handler de consola en el logger raíz.

    Args:
        level (str): Nivel de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Raises:
        ValueError: Si el nivel de log no es válido.

    """

    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nivel de log inválido: {level}. Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Sustituye handlers previos para evitar líneas duplicadas al recargar.
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
