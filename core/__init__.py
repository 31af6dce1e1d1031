# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de la capa de cifrado de payloads.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_sym",
    "errors",
    "models",
    "payload",
    "session",
]
