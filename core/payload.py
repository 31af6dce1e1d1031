# --------------------------------------------------------------
# File: payload.py
# Description: Operaciones de descifrado y cifrado de payloads compatibles con Go.
# --------------------------------------------------------------
"""Capa de operaciones: validación de clave, Base64 y apertura de tramas AES-GCM."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any

from cryptography.exceptions import InvalidTag

from core.crypto_sym import KEY_SIZE, NONCE_SIZE, TAG_SIZE, aes_gcm_open, aes_gcm_seal
from core.errors import PayloadDecryptionError, PayloadValidationError
from core.models import DecryptedPayload, SealedPayload

__all__ = ["validate_key", "decode_b64", "decrypt_payload", "encrypt_payload"]

logger = logging.getLogger(__name__)

KEY_LENGTH_MESSAGE = f"La clave debe tener exactamente {KEY_SIZE} bytes ({KEY_SIZE} caracteres ASCII) para AES-256."
EMPTY_INPUT_MESSAGE = "Introduce una cadena cifrada."


def validate_key(secret_key: str) -> bytes:
    """Comprueba que la clave ocupe exactamente 32 bytes en UTF-8.

    Args:
        secret_key (str): Clave compartida introducida por el usuario.

    Returns:
        bytes: Material de clave AES-256 sin derivar.

    Raises:
        PayloadValidationError: Si la longitud en bytes no es 32.

    """

    key = secret_key.encode("utf-8")
    if len(key) != KEY_SIZE:
        raise PayloadValidationError(KEY_LENGTH_MESSAGE)
    return key


def decode_b64(value: str) -> bytes:
    """Decodifica Base64 estándar ignorando espacios y el relleno omitido.

    Args:
        value (str): Texto Base64 pegado desde una respuesta de la API.

    Returns:
        bytes: Datos binarios decodificados.

    Raises:
        binascii.Error: Si la longitud es inválida o hay caracteres fuera del alfabeto.
        ValueError: Si el texto contiene caracteres no ASCII.

    """

    compact = "".join(value.split())
    if len(compact) % 4 == 1:
        raise binascii.Error("Longitud Base64 inválida")
    compact += "=" * (-len(compact) % 4)
    return base64.b64decode(compact, validate=True)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Constante JSON no estándar: {name}")


def _parse_text(text: str) -> DecryptedPayload:
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return DecryptedPayload(text=text, value=text, is_json=False)
    return DecryptedPayload(text=text, value=value, is_json=True)


def decrypt_payload(secret_key: str, encrypted_b64: str) -> DecryptedPayload:
    """Descifra un payload Base64 `nonce ‖ ciphertext ‖ tag` y lo interpreta.

    Args:
        secret_key (str): Clave compartida de 32 bytes.
        encrypted_b64 (str): Cadena Base64 recibida del backend.

    Returns:
        DecryptedPayload: Texto recuperado y su valor JSON si procede.

    Raises:
        PayloadValidationError: Si la clave no mide 32 bytes o la entrada está vacía.
        PayloadDecryptionError: Si falla el Base64, la longitud, la etiqueta o el UTF-8.

    """

    key = validate_key(secret_key)
    if not encrypted_b64 or not encrypted_b64.strip():
        raise PayloadValidationError(EMPTY_INPUT_MESSAGE)

    try:
        blob = decode_b64(encrypted_b64)
    except ValueError as exc:
        logger.warning("Entrada Base64 inválida: %s", exc)
        raise PayloadDecryptionError() from exc

    if len(blob) < NONCE_SIZE:
        logger.warning("Trama de %d bytes, menor que el nonce de %d", len(blob), NONCE_SIZE)
        raise PayloadDecryptionError()

    try:
        plaintext = aes_gcm_open(key, blob)
    except InvalidTag as exc:
        logger.warning("Etiqueta GCM no válida: clave incorrecta o datos alterados")
        raise PayloadDecryptionError() from exc
    except ValueError as exc:
        logger.warning("Trama no válida: %s", exc)
        raise PayloadDecryptionError() from exc

    try:
        text = plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("El claro recuperado no es UTF-8 válido")
        raise PayloadDecryptionError() from exc

    result = _parse_text(text)
    logger.info("Payload descifrado: %d bytes, json=%s", len(plaintext), result.is_json)
    return result


def encrypt_payload(secret_key: str, plaintext: str) -> SealedPayload:
    """Cifra texto arbitrario en el mismo formato que produce el backend.

    Args:
        secret_key (str): Clave compartida de 32 bytes.
        plaintext (str): Texto (normalmente JSON) a ocultar.

    Returns:
        SealedPayload: Cadena Base64 de `nonce ‖ ciphertext ‖ tag` y sus tamaños.

    Raises:
        PayloadValidationError: Si la clave no mide 32 bytes.

    """

    key = validate_key(secret_key)
    data = plaintext.encode("utf-8")
    blob = aes_gcm_seal(key, data)
    logger.info("Payload cifrado: %d bytes en claro, %d bytes de trama", len(data), len(blob))
    return SealedPayload(
        ciphertext_b64=base64.b64encode(blob).decode("ascii"),
        nonce_len=NONCE_SIZE,
        ciphertext_len=len(blob) - NONCE_SIZE - TAG_SIZE,
        tag_len=TAG_SIZE,
    )
