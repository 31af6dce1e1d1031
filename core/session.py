# --------------------------------------------------------------
# File: session.py
# Description: Estado compartido de las vistas de descifrado y simulación.
# --------------------------------------------------------------
"""Estado de sesión de la herramienta y acciones disparadas por los botones."""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import BaseModel

from core import config
from core.crypto_sym import KEY_SIZE
from core.errors import PayloadError
from core.models import DecryptedPayload, SealedPayload
from core.payload import decrypt_payload, encrypt_payload

logger = logging.getLogger(__name__)

Tab = Literal["decrypt", "encrypt"]
TABS = ("decrypt", "encrypt")


class PayloadSession(BaseModel):
    """Campos de la página: clave compartida, vista activa y estado de cada vista.

    Attributes:
        secret_key (str): Clave AES-256 compartida por ambas vistas.
        active_tab (Tab): Vista visible, `decrypt` o `encrypt`.
        encrypted_input (str): Base64 pegado en la vista de descifrado.
        decrypted_result (Optional[DecryptedPayload]): Último resultado correcto.
        decrypt_error (str): Mensaje del último fallo de descifrado.
        json_input (str): Texto a cifrar en el simulador.
        sealed (Optional[SealedPayload]): Último payload cifrado.
        encrypt_error (str): Mensaje del último fallo de cifrado.

    """

    secret_key: str = config.DEFAULT_SECRET_KEY
    active_tab: Tab = "decrypt"

    encrypted_input: str = ""
    decrypted_result: Optional[DecryptedPayload] = None
    decrypt_error: str = ""

    json_input: str = config.DEFAULT_JSON_INPUT
    sealed: Optional[SealedPayload] = None
    encrypt_error: str = ""

    @property
    def generated_ciphertext(self) -> str:
        return self.sealed.ciphertext_b64 if self.sealed else ""

    def key_length(self) -> int:
        """Longitud en bytes UTF-8 de la clave actual."""

        return len(self.secret_key.encode("utf-8"))

    def key_is_valid(self) -> bool:
        return self.key_length() == KEY_SIZE

    def switch_tab(self, tab: str) -> None:
        """Cambia la vista activa.

        Raises:
            ValueError: Si `tab` no es una de las dos vistas.

        """

        if tab not in TABS:
            raise ValueError(f"Vista desconocida: {tab!r}")
        self.active_tab = tab

    def run_decrypt(self) -> bool:
        """Ejecuta el descifrado con el estado actual.

        Returns:
            bool: ``True`` si hay resultado; ``False`` si se registró un error.

        """

        self.decrypt_error = ""
        self.decrypted_result = None
        try:
            self.decrypted_result = decrypt_payload(self.secret_key, self.encrypted_input)
        except PayloadError as exc:
            logger.warning("Descifrado rechazado: %s", exc.message)
            self.decrypt_error = exc.message
            return False
        return True

    def run_encrypt(self) -> bool:
        """Ejecuta el cifrado del simulador con el estado actual.

        Returns:
            bool: ``True`` si se generó el ciphertext; ``False`` en caso de error.

        """

        self.encrypt_error = ""
        self.sealed = None
        try:
            self.sealed = encrypt_payload(self.secret_key, self.json_input)
        except PayloadError as exc:
            logger.warning("Cifrado rechazado: %s", exc.message)
            self.encrypt_error = exc.message
            return False
        return True

    def send_to_decrypt(self) -> None:
        """Lleva el ciphertext generado a la vista de descifrado para probar el ciclo."""

        self.encrypted_input = self.generated_ciphertext
        self.decrypted_result = None
        self.decrypt_error = ""
        self.active_tab = "decrypt"
