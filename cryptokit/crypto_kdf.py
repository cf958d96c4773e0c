# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas seguras mediante Argon2id.
# --------------------------------------------------------------
"""Funciones de derivación de claves AES a partir de passphrases."""

from typing import Optional

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from cryptokit import config
from cryptokit.crypto_random import get_secure_random
from cryptokit.crypto_sym import AES_KEY_SIZES
from cryptokit.errors import CryptoError, InvalidKeyLength, MissingArgument
from cryptokit.models import KdfParams

DEFAULT_SALT_SIZE = 16
MIN_SALT_SIZE = 8


def default_kdf_params(outlen: int = 32) -> KdfParams:
    """Parámetros Argon2id por defecto tomados de la configuración."""

    return KdfParams(
        t=config.KDF_TIME_COST,
        m=config.KDF_MEMORY_COST,
        p=config.KDF_PARALLELISM,
        outlen=outlen,
    )


def generate_salt(size: int = DEFAULT_SALT_SIZE) -> bytes:
    """Genera una sal aleatoria para Argon2id (mínimo 8 bytes)."""

    if size < MIN_SALT_SIZE:
        raise ValueError("La sal de Argon2id debe medir al menos 8 bytes.")
    return get_secure_random().random_bytes(size)


def derive_kek(
    passphrase: str,
    salt: bytes,
    *,
    t: Optional[int] = None,
    m: Optional[int] = None,
    p: Optional[int] = None,
    outlen: int = 32,
) -> bytes:
    """Deriva una clave de cifrado (KEK) usando Argon2id.

    Args:
        passphrase (str): Passphrase de entrada del usuario.
        salt (bytes): Salt aleatoria asociada a la passphrase.
        t (Optional[int]): Coste temporal en iteraciones Argon2id.
        m (Optional[int]): Memoria en KiB consumida durante la derivación.
        p (Optional[int]): Paralelismo configurado para Argon2id.
        outlen (int): Longitud en bytes de la clave resultante (16, 24 o 32).

    Returns:
        bytes: Clave simétrica derivada lista para AES-GCM.

    Raises:
        MissingArgument: Si la passphrase está vacía.
        InvalidKeyLength: Si `outlen` no es un tamaño de clave AES.
        CryptoError: Si Argon2id rechaza la sal o los parámetros de coste.

    """

    if not passphrase:
        raise MissingArgument("La passphrase es obligatoria.")
    if outlen not in AES_KEY_SIZES:
        raise InvalidKeyLength(f"Longitud de clave derivada no soportada: {outlen} bytes.")

    try:
        return hash_secret_raw(
            passphrase.encode("utf-8"),
            salt,
            time_cost=config.KDF_TIME_COST if t is None else t,
            memory_cost=config.KDF_MEMORY_COST if m is None else m,
            parallelism=config.KDF_PARALLELISM if p is None else p,
            hash_len=outlen,
            type=Type.ID,
        )
    except HashingError as exc:
        raise CryptoError(f"Argon2id rechazó los parámetros de derivación: {exc}") from exc
