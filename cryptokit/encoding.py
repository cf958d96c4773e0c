# --------------------------------------------------------------
# File: encoding.py
# Description: Conversión entre bytes y representaciones de texto hex/Base64.
# --------------------------------------------------------------
"""Puente de codificación para transportar digests y ciphertexts como texto."""

from __future__ import annotations

import base64
import binascii
import re

from cryptokit.errors import InvalidEncoding

__all__ = ["from_b64u", "from_base64", "from_hex", "to_b64u", "to_base64", "to_hex"]

_HEX = re.compile(r"[0-9a-fA-F]*")
_B64U = re.compile(r"[A-Za-z0-9_-]*")


def to_hex(data: bytes) -> str:
    """Codifica bytes en hexadecimal en minúsculas."""

    return binascii.hexlify(data).decode("ascii")


def from_hex(value: str) -> bytes:
    """Decodifica una cadena hexadecimal estricta.

    Args:
        value (str): Texto hexadecimal, sin espacios ni prefijo `0x`.

    Returns:
        bytes: Datos binarios originales.

    Raises:
        InvalidEncoding: Si hay caracteres no hexadecimales o la longitud es impar.

    """
    if not isinstance(value, str) or _HEX.fullmatch(value) is None:
        raise InvalidEncoding("El texto contiene caracteres no hexadecimales.")
    if len(value) % 2:
        raise InvalidEncoding("La longitud del texto hexadecimal es impar.")
    return binascii.unhexlify(value)


def to_base64(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def from_base64(value: str) -> bytes:
    """Decodifica Base64 estándar validando alfabeto y relleno.

    Args:
        value (str): Texto Base64 con relleno `=`.

    Returns:
        bytes: Datos binarios originales.

    Raises:
        InvalidEncoding: Si el alfabeto o el relleno no son válidos, o si el
            texto no es la codificación canónica de los datos.

    """
    try:
        data = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise InvalidEncoding("Texto Base64 no válido.") from exc
    # Los bits sobrantes del último carácter deben ser cero.
    if to_base64(data) != value:
        raise InvalidEncoding("Texto Base64 no canónico.")
    return data


def to_b64u(data: bytes) -> str:
    """Codifica datos binarios en Base64 URL-safe sin relleno."""

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def from_b64u(value: str) -> bytes:
    """Decodifica Base64 URL-safe sin relleno, exigiendo la forma canónica."""

    if not isinstance(value, str) or _B64U.fullmatch(value) is None or len(value) % 4 == 1:
        raise InvalidEncoding("Texto Base64 URL-safe no válido.")
    pad = "=" * (-len(value) % 4)
    try:
        data = base64.urlsafe_b64decode(value + pad)
    except binascii.Error as exc:
        raise InvalidEncoding("Texto Base64 URL-safe no válido.") from exc
    if to_b64u(data) != value:
        raise InvalidEncoding("Texto Base64 URL-safe no canónico.")
    return data
