# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores de las operaciones de cifrado de payloads.
# --------------------------------------------------------------
"""Excepciones de dominio para validación y descifrado de payloads."""

__all__ = ["PayloadError", "PayloadValidationError", "PayloadDecryptionError"]

GENERIC_DECRYPT_MESSAGE = "Descifrado fallido. Revisa la clave y la entrada."


class PayloadError(Exception):
    """Error base con un mensaje legible para mostrar en la interfaz.

    Attributes:
        message (str): Texto que se presenta tal cual al usuario.

    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PayloadValidationError(PayloadError):
    """Entrada rechazada antes de invocar cualquier primitiva criptográfica."""


class PayloadDecryptionError(PayloadError):
    """Fallo de Base64, longitud, etiqueta GCM o UTF-8 durante el descifrado."""

    def __init__(self, message: str = GENERIC_DECRYPT_MESSAGE) -> None:
        super().__init__(message)
