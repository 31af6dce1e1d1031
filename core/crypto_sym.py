# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM con el nonce antepuesto al ciphertext.
# --------------------------------------------------------------
"""Rutinas de sellado y apertura AES-256-GCM en formato `nonce ‖ ct ‖ tag`."""

import os
from typing import Optional

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from core.models import FramedCiphertext

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16


def split_frame(blob: bytes) -> FramedCiphertext:
    """Separa una trama en nonce, ciphertext y tag.

    Args:
        blob (bytes): Trama completa recibida del backend.

    Returns:
        FramedCiphertext: Componentes de la trama.

    Raises:
        ValueError: Si la trama no alcanza el tamaño mínimo de nonce y tag.

    """

    if len(blob) < NONCE_SIZE + TAG_SIZE:
        raise ValueError(
            f"Trama demasiado corta: {len(blob)} bytes (mínimo {NONCE_SIZE + TAG_SIZE})"
        )
    return FramedCiphertext(
        nonce=blob[:NONCE_SIZE],
        ciphertext=blob[NONCE_SIZE:-TAG_SIZE],
        tag=blob[-TAG_SIZE:],
    )


def aes_gcm_seal(key: bytes, plaintext: bytes, aad: Optional[bytes] = None) -> bytes:
    """Cifra datos con AES-GCM y antepone un nonce aleatorio de 96 bits.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Trama `nonce ‖ ciphertext ‖ tag`.

    """

    nonce = os.urandom(NONCE_SIZE)
    aes = AESGCM(key)
    return nonce + aes.encrypt(nonce, plaintext, aad)


def aes_gcm_open(key: bytes, blob: bytes, aad: Optional[bytes] = None) -> bytes:
    """Descifra una trama `nonce ‖ ciphertext ‖ tag` con AES-GCM.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        blob (bytes): Trama completa.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        ValueError: Si la trama es más corta que nonce y tag.
        cryptography.exceptions.InvalidTag: Si la etiqueta no se verifica.

    """

    frame = split_frame(blob)
    aes = AESGCM(key)
    return aes.decrypt(frame.nonce, frame.ciphertext + frame.tag, aad)
