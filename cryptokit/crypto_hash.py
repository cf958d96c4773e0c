# --------------------------------------------------------------
# File: crypto_hash.py
# Description: Cálculo de digests SHA-256 y SHA-512 sobre bytes y texto.
# --------------------------------------------------------------
"""Proveedor de digests deterministas con salidas en bytes, hex y Base64."""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Optional, Union

from cryptokit.encoding import to_base64, to_hex
from cryptokit.errors import MissingArgument, UnsupportedAlgorithm


class HashAlgorithm(str, Enum):
    """Algoritmos de hash admitidos."""

    SHA256 = "sha256"
    SHA512 = "sha512"


AlgorithmLike = Union[HashAlgorithm, str]

_DIGEST_SIZES = {HashAlgorithm.SHA256: 32, HashAlgorithm.SHA512: 64}


def resolve_algorithm(algorithm: AlgorithmLike) -> HashAlgorithm:
    """Normaliza un selector (`"SHA-256"`, `"sha_512"`...) al enum.

    Raises:
        UnsupportedAlgorithm: Si el selector no corresponde a SHA-256/512.

    """
    if isinstance(algorithm, HashAlgorithm):
        return algorithm
    if isinstance(algorithm, str):
        name = algorithm.strip().lower().replace("-", "").replace("_", "")
        for candidate in HashAlgorithm:
            if candidate.value == name:
                return candidate
    raise UnsupportedAlgorithm(f"Algoritmo de hash no soportado: {algorithm!r}")


def digest_size(algorithm: AlgorithmLike) -> int:
    """Longitud en bytes del digest del algoritmo."""

    return _DIGEST_SIZES[resolve_algorithm(algorithm)]


def digest(algorithm: AlgorithmLike, data: bytes) -> bytes:
    """Calcula el digest de `data`.

    Args:
        algorithm (AlgorithmLike): SHA-256 o SHA-512.
        data (bytes): Datos de entrada, de cualquier longitud.

    Returns:
        bytes: Digest de 32 o 64 bytes.

    """
    algo = resolve_algorithm(algorithm)
    return hashlib.new(algo.value, data).digest()


def digest_hex(algorithm: AlgorithmLike, data: bytes) -> str:
    """Digest codificado en hexadecimal."""

    return to_hex(digest(algorithm, data))


def digest_base64(algorithm: AlgorithmLike, data: bytes) -> str:
    """Digest codificado en Base64 estándar."""

    return to_base64(digest(algorithm, data))


def sha256(data: bytes) -> bytes:
    return digest(HashAlgorithm.SHA256, data)


def sha512(data: bytes) -> bytes:
    return digest(HashAlgorithm.SHA512, data)


def hash_text(
    target: Optional[str],
    salt: Optional[str] = None,
    algorithm: AlgorithmLike = HashAlgorithm.SHA256,
) -> bytes:
    """Calcula el hash de un texto, concatenando la sal si se indica.

    Args:
        target (Optional[str]): Texto a resumir; no puede ser vacío.
        salt (Optional[str]): Sal que se añade tras el texto.
        algorithm (AlgorithmLike): SHA-256 (por defecto) o SHA-512.

    Returns:
        bytes: Digest de `target || salt` en UTF-8.

    Raises:
        MissingArgument: Si `target` es None o una cadena vacía.

    """
    if target is None:
        raise MissingArgument("No se ha indicado el texto a resumir.")
    if not target:
        raise MissingArgument("El texto a resumir está vacío.")

    algo = resolve_algorithm(algorithm)
    hasher = hashlib.new(algo.value)
    hasher.update(target.encode("utf-8"))
    if salt is not None:
        hasher.update(salt.encode("utf-8"))
    return hasher.digest()
