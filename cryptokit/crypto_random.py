# --------------------------------------------------------------
# File: crypto_random.py
# Description: Fuente aleatoria segura con inicialización única y protegida.
# --------------------------------------------------------------
"""Generador aleatorio criptográfico compartido por nonces, sales y claves."""

from __future__ import annotations

import os
import threading
from typing import Optional

from cryptokit.logs import get_logger

logger = get_logger(__name__)

_instance: Optional["SecureRandom"] = None
_instance_lock = threading.Lock()


class SecureRandom:
    """Envoltorio sobre `os.urandom` con una comprobación inicial de salud.

    La comprobación se ejecuta una sola vez al construir la instancia: dos
    extracciones consecutivas deben diferir y no ser todo ceros.
    """

    _HEALTH_CHECK_SIZE = 32

    def __init__(self) -> None:
        first = os.urandom(self._HEALTH_CHECK_SIZE)
        second = os.urandom(self._HEALTH_CHECK_SIZE)
        if first == second or not any(first):
            raise RuntimeError("La fuente aleatoria del sistema no supera la comprobación inicial.")
        logger.debug("secure_random_ready", source="os.urandom")

    def random_bytes(self, size: int) -> bytes:
        """Devuelve `size` bytes aleatorios de calidad criptográfica.

        Args:
            size (int): Número de bytes solicitados, mayor o igual que cero.

        Returns:
            bytes: Secuencia aleatoria de la longitud pedida.

        """
        if size < 0:
            raise ValueError("El tamaño solicitado no puede ser negativo.")
        return os.urandom(size)


def get_secure_random() -> SecureRandom:
    """Obtiene la instancia de proceso creándola la primera vez bajo un lock."""

    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = SecureRandom()
    return _instance


def random_bytes(size: int) -> bytes:
    """Atajo para extraer bytes de la fuente compartida."""

    return get_secure_random().random_bytes(size)
