# --------------------------------------------------------------
# File: services.py
# Description: Servicios de texto sobre las primitivas de hash y cifrado.
# --------------------------------------------------------------
"""Funciones de la capa de servicios para transportar resultados como texto."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import ValidationError

from cryptokit.crypto_asym import PrivateKeyLike, PublicKeyLike, rsa_decrypt, rsa_encrypt
from cryptokit.crypto_hash import AlgorithmLike, HashAlgorithm, digest_hex, digest_size
from cryptokit.crypto_kdf import MIN_SALT_SIZE, default_kdf_params, derive_kek, generate_salt
from cryptokit.crypto_sym import aes_gcm_decrypt_with_key, aes_gcm_encrypt_with_key, open_sealed, seal
from cryptokit.encoding import from_b64u, from_base64, to_b64u, to_base64
from cryptokit.errors import DecryptionFailed, InvalidEncoding
from cryptokit.logs import get_logger
from cryptokit.models import PassphraseEnvelope

__all__ = [
    "content_fingerprint",
    "decrypt_text",
    "decrypt_with_passphrase",
    "encrypt_text",
    "encrypt_with_passphrase",
    "rsa_decrypt_text",
    "rsa_encrypt_text",
]

logger = get_logger(__name__)


def _decode_utf8(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding("El mensaje descifrado no es texto UTF-8.") from exc


def encrypt_text(key: bytes, text: str, aad: Optional[bytes] = None) -> str:
    """Cifra un texto con AES-GCM y devuelve el sobre en Base64.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        text (str): Texto en claro.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        str: Base64 de `nonce || ciphertext || tag`.

    """

    return to_base64(seal(key, text.encode("utf-8"), aad))


def decrypt_text(key: bytes, token: str, aad: Optional[bytes] = None) -> str:
    """Revierte `encrypt_text`.

    Raises:
        InvalidEncoding: Si el token no es Base64.
        AuthenticationFailed: Si el sobre fue alterado o la clave no corresponde.

    """

    return _decode_utf8(open_sealed(key, from_base64(token), aad))


def encrypt_with_passphrase(passphrase: str, data: bytes) -> str:
    """Cifra datos con una clave Argon2id derivada de la passphrase.

    El documento resultante incluye la sal y los parámetros de derivación,
    por lo que basta con la passphrase para recuperar los datos.

    Args:
        passphrase (str): Passphrase del usuario.
        data (bytes): Datos a proteger.

    Returns:
        str: Documento JSON `PassphraseEnvelope`.

    """

    salt = generate_salt()
    params = default_kdf_params()
    kek = derive_kek(passphrase, salt, t=params.t, m=params.m, p=params.p, outlen=params.outlen)
    result = aes_gcm_encrypt_with_key(kek, data)
    envelope = PassphraseEnvelope(
        salt=to_b64u(salt),
        kdf_params=params,
        nonce=to_b64u(result.nonce),
        tag=to_b64u(result.tag),
        ct=to_b64u(result.ciphertext),
    )
    logger.debug("passphrase_envelope_created", t=params.t, m=params.m, p=params.p)
    return envelope.model_dump_json()


def decrypt_with_passphrase(passphrase: str, document: Union[str, bytes]) -> bytes:
    """Recupera los datos protegidos por `encrypt_with_passphrase`.

    Args:
        passphrase (str): Passphrase usada al cifrar.
        document (Union[str, bytes]): Documento JSON `PassphraseEnvelope`.

    Returns:
        bytes: Datos originales.

    Raises:
        InvalidEncoding: Si el documento está mal formado.
        AuthenticationFailed: Si la passphrase es incorrecta o hubo manipulación.

    """

    try:
        envelope = PassphraseEnvelope.model_validate_json(document)
    except ValidationError as exc:
        raise InvalidEncoding("El documento cifrado no es válido.") from exc

    salt = from_b64u(envelope.salt)
    if len(salt) < MIN_SALT_SIZE:
        raise InvalidEncoding("La sal del documento cifrado es demasiado corta.")

    params = envelope.kdf_params
    kek = derive_kek(
        passphrase,
        salt,
        t=params.t,
        m=params.m,
        p=params.p,
        outlen=params.outlen,
    )
    return aes_gcm_decrypt_with_key(
        kek,
        from_b64u(envelope.nonce),
        from_b64u(envelope.ct),
        from_b64u(envelope.tag),
    )


def rsa_encrypt_text(public_key: PublicKeyLike, text: str) -> str:
    """Cifra un texto corto con RSA-OAEP y lo devuelve en Base64."""

    return to_base64(rsa_encrypt(public_key, text.encode("utf-8")))


def rsa_decrypt_text(
    private_key: PrivateKeyLike,
    token: str,
    passphrase: Optional[Union[bytes, str]] = None,
) -> str:
    """Revierte `rsa_encrypt_text`.

    Un token que no es Base64 se reporta como `DecryptionFailed`, igual que
    cualquier otro fallo de descifrado. `passphrase` abre un PEM privado cifrado.
    """

    try:
        ciphertext = from_base64(token)
    except InvalidEncoding:
        raise DecryptionFailed("No se ha podido descifrar el mensaje.") from None
    return _decode_utf8(rsa_decrypt(private_key, ciphertext, passphrase))


def content_fingerprint(
    content: Union[bytes, str],
    algorithm: AlgorithmLike = HashAlgorithm.SHA256,
    length: Optional[int] = None,
) -> str:
    """Huella hexadecimal de un contenido, útil para nombrar ficheros.

    Args:
        content (Union[bytes, str]): Contenido; los textos se codifican en UTF-8.
        algorithm (AlgorithmLike): SHA-256 (por defecto) o SHA-512.
        length (Optional[int]): Número de caracteres hex a conservar.

    Returns:
        str: Digest hexadecimal, completo o truncado.

    """

    data = content.encode("utf-8") if isinstance(content, str) else content
    hex_digest = digest_hex(algorithm, data)
    if length is None:
        return hex_digest
    if not 1 <= length <= 2 * digest_size(algorithm):
        raise ValueError(f"Longitud de huella fuera de rango: {length}.")
    return hex_digest[:length]
