# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del formato de trama y de los resultados de sesión.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan la trama AES-GCM y los payloads resultantes."""

import json
from typing import Any

from pydantic import BaseModel


class FramedCiphertext(BaseModel):
    """Representa una trama `nonce ‖ ciphertext ‖ tag` ya separada.

    Attributes:
        nonce (bytes): Vector de inicialización de 96 bits al inicio de la trama.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits al final de la trama.

    """

    nonce: bytes
    ciphertext: bytes
    tag: bytes

    def to_bytes(self) -> bytes:
        """Reconstruye la trama contigua tal y como la produce `Seal` en Go."""

        return self.nonce + self.ciphertext + self.tag


class DecryptedPayload(BaseModel):
    """Resultado de descifrar un payload.

    Attributes:
        text (str): Texto UTF-8 recuperado.
        value (Any): Valor JSON interpretado, o el propio texto si no es JSON.
        is_json (bool): Indica si `value` procede de un JSON válido.

    """

    text: str
    value: Any = None
    is_json: bool = False

    def pretty(self) -> str:
        """Devuelve la representación indentada usada para mostrar y copiar."""

        if not self.is_json:
            return self.text
        return json.dumps(self.value, indent=2, ensure_ascii=False)


class SealedPayload(BaseModel):
    """Resultado de cifrar un payload en el formato de intercambio."""

    ciphertext_b64: str
    nonce_len: int
    ciphertext_len: int
    tag_len: int
