# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de entorno y configuración de logging de la herramienta.
# --------------------------------------------------------------
"""Valores por defecto de la sesión leídos desde el entorno o un `.env`."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECRET_KEY = os.getenv("PAYLOAD_SECRET_KEY", "myverystrongpasswordo32bitlength")
DEFAULT_JSON_INPUT = os.getenv(
    "PAYLOAD_SAMPLE_JSON",
    '{\n  "id": 123,\n  "role": "admin",\n  "credit_card": "4111-xxxx-xxxx-1111"\n}',
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Inicializa el logging raíz una sola vez con el nivel configurado.

    Args:
        level (str | None): Nivel explícito; si falta se usa `LOG_LEVEL`.

    """

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)
