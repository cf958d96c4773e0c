# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores expuesta por las utilidades criptográficas.
# --------------------------------------------------------------
"""Excepciones de dominio que sustituyen a los errores de bajo nivel.

Cada operación traduce en su frontera las excepciones de `cryptography`,
`binascii` o `pydantic` a una de estas clases, de modo que el llamante sólo
necesita conocer `CryptoError` y sus subclases.
"""

__all__ = [
    "AuthenticationFailed",
    "CryptoError",
    "DecryptionFailed",
    "InvalidEncoding",
    "InvalidKeyLength",
    "MissingArgument",
    "PlaintextTooLarge",
    "UnsupportedAlgorithm",
]


class CryptoError(Exception):
    """Error base de todas las operaciones del paquete."""


class UnsupportedAlgorithm(CryptoError):
    """El selector de algoritmo o el tipo de clave no está soportado."""


class InvalidKeyLength(CryptoError):
    """La clave o el tamaño de clave solicitado no es admisible."""


class AuthenticationFailed(CryptoError):
    """La etiqueta AES-GCM no verifica: datos alterados o clave incorrecta."""


class PlaintextTooLarge(CryptoError):
    """El mensaje supera la capacidad de RSA-OAEP para la clave dada."""


class DecryptionFailed(CryptoError):
    """Fallo genérico de descifrado RSA, sin detallar la causa interna."""


class InvalidEncoding(CryptoError, ValueError):
    """El texto no es hex/base64 válido o el documento está mal formado."""


class MissingArgument(CryptoError):
    """Falta un argumento obligatorio o está vacío."""
