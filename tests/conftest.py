# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con claves de prueba y sesiones limpias.
# --------------------------------------------------------------

import pytest

from core.session import PayloadSession

DEMO_KEY = "myverystrongpasswordo32bitlength"


@pytest.fixture
def secret_key() -> str:
    """Clave de demostración de 32 bytes compartida con el backend de pruebas."""
    return DEMO_KEY


@pytest.fixture
def session(secret_key) -> PayloadSession:
    """Sesión nueva con la clave de demostración y la vista de descifrado activa.

    Args:
        secret_key (str): Clave proporcionada por el fixture homónimo.

    Returns:
        PayloadSession: Estado inicial sin resultados ni errores.
    """
    return PayloadSession(secret_key=secret_key)

