# --------------------------------------------------------------
# File: crypto_asym.py
# Description: Cifrado asimétrico RSA-OAEP y gestión de pares de claves PEM.
# --------------------------------------------------------------
"""Abstracciones criptográficas para generación de claves y cifrado RSA-OAEP."""

from __future__ import annotations

from typing import Optional, Union

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from cryptokit import config
from cryptokit.errors import (
    DecryptionFailed,
    InvalidEncoding,
    InvalidKeyLength,
    PlaintextTooLarge,
    UnsupportedAlgorithm,
)
from cryptokit.logs import get_logger
from cryptokit.models import RsaKeyPair

PublicKeyLike = Union[rsa.RSAPublicKey, bytes, str]
PrivateKeyLike = Union[rsa.RSAPrivateKey, bytes, str]

PUBLIC_EXPONENT = 65537
# SHA-256 en OAEP: la sobrecarga es 2 * 32 + 2 bytes.
_OAEP_HASH_SIZE = 32

logger = get_logger(__name__)


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def _as_bytes(pem: Union[bytes, str]) -> bytes:
    return pem.encode("ascii") if isinstance(pem, str) else pem


def _as_passphrase(passphrase: Optional[Union[bytes, str]]) -> Optional[bytes]:
    if passphrase is None:
        return None
    return passphrase.encode("utf-8") if isinstance(passphrase, str) else passphrase


def load_rsa_public_key(public_key: PublicKeyLike) -> rsa.RSAPublicKey:
    """Carga una clave pública RSA desde PEM o la devuelve si ya es un objeto.

    Args:
        public_key (PublicKeyLike): Objeto `RSAPublicKey` o PEM SubjectPublicKeyInfo.

    Returns:
        rsa.RSAPublicKey: Clave pública lista para cifrar.

    Raises:
        InvalidEncoding: Si el PEM no se puede interpretar.
        UnsupportedAlgorithm: Si la clave no es RSA.

    """

    if isinstance(public_key, rsa.RSAPublicKey):
        return public_key
    try:
        key = serialization.load_pem_public_key(_as_bytes(public_key))
    except (ValueError, TypeError) as exc:
        raise InvalidEncoding("La clave pública PEM no es válida.") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise UnsupportedAlgorithm("Se esperaba una clave pública RSA.")
    return key


def load_rsa_private_key(
    private_key: PrivateKeyLike, passphrase: Optional[Union[bytes, str]] = None
) -> rsa.RSAPrivateKey:
    """Carga una clave privada RSA desde PEM, opcionalmente cifrada.

    Args:
        private_key (PrivateKeyLike): Objeto `RSAPrivateKey` o PEM PKCS8/PKCS1.
        passphrase (Optional[Union[bytes, str]]): Passphrase del PEM cifrado.

    Returns:
        rsa.RSAPrivateKey: Clave privada lista para descifrar.

    Raises:
        InvalidEncoding: Si el PEM es inválido o la passphrase no corresponde.
        UnsupportedAlgorithm: Si la clave no es RSA.

    """

    if isinstance(private_key, rsa.RSAPrivateKey):
        return private_key
    try:
        key = serialization.load_pem_private_key(
            _as_bytes(private_key), password=_as_passphrase(passphrase)
        )
    except (ValueError, TypeError) as exc:
        raise InvalidEncoding("La clave privada PEM no es válida.") from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise UnsupportedAlgorithm("Se esperaba una clave privada RSA.")
    return key


def rsa_generate_keypair(
    key_size: Optional[int] = None, passphrase: Optional[Union[bytes, str]] = None
) -> RsaKeyPair:
    """Genera un par de claves RSA en formato PEM.

    Args:
        key_size (Optional[int]): Tamaño del módulo en bits; por defecto
            `config.RSA_DEFAULT_KEY_SIZE`.
        passphrase (Optional[Union[bytes, str]]): Si se indica, la clave privada
            se cifra con el mejor algoritmo disponible.

    Returns:
        RsaKeyPair: Claves privada y pública en PEM.

    Raises:
        InvalidKeyLength: Si el tamaño es inferior a `config.RSA_MIN_KEY_SIZE`.

    """

    size = config.RSA_DEFAULT_KEY_SIZE if key_size is None else key_size
    if size < config.RSA_MIN_KEY_SIZE:
        raise InvalidKeyLength(
            f"Tamaño RSA inseguro: {size} bits (mínimo {config.RSA_MIN_KEY_SIZE})."
        )

    private_key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=size)
    secret = _as_passphrase(passphrase)
    encryption = (
        serialization.BestAvailableEncryption(secret)
        if secret
        else serialization.NoEncryption()
    )
    priv_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=encryption,
    )
    pub_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    logger.debug("rsa_keypair_generated", key_size=size, encrypted=bool(secret))
    return RsaKeyPair(private_pem=priv_pem, public_pem=pub_pem, key_size=size)


def rsa_max_plaintext_size(public_key: PublicKeyLike) -> int:
    """Número máximo de bytes cifrables con OAEP-SHA256 para la clave."""

    key = load_rsa_public_key(public_key)
    return (key.key_size + 7) // 8 - 2 * _OAEP_HASH_SIZE - 2


def rsa_encrypt(public_key: PublicKeyLike, plaintext: bytes) -> bytes:
    """Cifra un mensaje corto con la clave pública RSA usando OAEP.

    Args:
        public_key (PublicKeyLike): Clave pública RSA o su PEM.
        plaintext (bytes): Mensaje que se cifrará.

    Returns:
        bytes: Ciphertext de la longitud del módulo.

    Raises:
        PlaintextTooLarge: Si el mensaje supera la capacidad de OAEP.

    """

    key = load_rsa_public_key(public_key)
    limit = rsa_max_plaintext_size(key)
    if len(plaintext) > limit:
        raise PlaintextTooLarge(
            f"El mensaje mide {len(plaintext)} bytes y el máximo para esta clave es {limit}."
        )
    return key.encrypt(plaintext, _oaep())


def rsa_decrypt(
    private_key: PrivateKeyLike,
    ciphertext: bytes,
    passphrase: Optional[Union[bytes, str]] = None,
) -> bytes:
    """Descifra un mensaje RSA-OAEP con la clave privada.

    El fallo es siempre el mismo `DecryptionFailed`, sin encadenar la causa,
    sea cual sea el motivo (longitud, relleno o clave).

    Args:
        private_key (PrivateKeyLike): Clave privada RSA o su PEM, cifrado o no.
        ciphertext (bytes): Mensaje cifrado.
        passphrase (Optional[Union[bytes, str]]): Passphrase del PEM cifrado.

    Returns:
        bytes: Mensaje original.

    Raises:
        InvalidEncoding: Si el PEM es inválido o la passphrase no corresponde.
        DecryptionFailed: Si el mensaje no se puede descifrar.

    """

    key = load_rsa_private_key(private_key, passphrase)
    try:
        return key.decrypt(ciphertext, _oaep())
    except ValueError:
        logger.warning("rsa_decrypt_failed")
        raise DecryptionFailed("No se ha podido descifrar el mensaje.") from None
