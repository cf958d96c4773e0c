# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado con claves del llamante."""

from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from cryptokit.crypto_random import SecureRandom, get_secure_random
from cryptokit.errors import AuthenticationFailed, InvalidKeyLength
from cryptokit.logs import get_logger
from cryptokit.models import NONCE_SIZE, TAG_SIZE, AesGcmResult

__all__ = [
    "AES_KEY_SIZES",
    "NONCE_SIZE",
    "TAG_SIZE",
    "aes_gcm_decrypt_with_key",
    "aes_gcm_encrypt_with_key",
    "generate_aes_key",
    "open_sealed",
    "seal",
]

AES_KEY_SIZES = (16, 24, 32)

logger = get_logger(__name__)


def _check_key(key: bytes) -> None:
    """Valida que la clave tenga 128, 192 o 256 bits."""

    if len(key) not in AES_KEY_SIZES:
        raise InvalidKeyLength(
            f"La clave AES debe medir 16, 24 o 32 bytes (recibidos {len(key)})."
        )


def generate_aes_key(bits: int = 256) -> bytes:
    """Genera una clave AES aleatoria.

    Args:
        bits (int): 128, 192 o 256.

    Returns:
        bytes: Clave simétrica de la longitud solicitada.

    """

    if bits % 8 or bits // 8 not in AES_KEY_SIZES:
        raise InvalidKeyLength(f"Tamaño de clave AES no soportado: {bits} bits.")
    return get_secure_random().random_bytes(bits // 8)


def aes_gcm_encrypt_with_key(
    key: bytes,
    plaintext: bytes,
    aad: Optional[bytes] = None,
    *,
    rng: Optional[SecureRandom] = None,
) -> AesGcmResult:
    """Cifra datos con AES-GCM utilizando una clave proporcionada.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar.
        aad (Optional[bytes]): Datos autenticados adicionales.
        rng (Optional[SecureRandom]): Fuente de nonces; por defecto la compartida.

    Returns:
        AesGcmResult: Resultado con `nonce`, `ciphertext` y `tag`.

    Raises:
        InvalidKeyLength: Si la clave no mide 16, 24 o 32 bytes.

    """

    _check_key(key)
    nonce = (rng or get_secure_random()).random_bytes(NONCE_SIZE)
    aes = AESGCM(key)
    ct_full = aes.encrypt(nonce, plaintext, aad)
    logger.debug("aes_gcm_encrypt", key_bits=len(key) * 8, size=len(plaintext))
    return AesGcmResult(nonce=nonce, ciphertext=ct_full[:-TAG_SIZE], tag=ct_full[-TAG_SIZE:])


def aes_gcm_decrypt_with_key(
    key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra datos con AES-GCM utilizando la clave simétrica proporcionada.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        InvalidKeyLength: Si la clave no mide 16, 24 o 32 bytes.
        AuthenticationFailed: Si la etiqueta no verifica.

    """

    _check_key(key)
    if len(nonce) != NONCE_SIZE or len(tag) != TAG_SIZE:
        logger.warning("aes_gcm_auth_failed", reason="malformed")
        raise AuthenticationFailed("No se ha podido autenticar el mensaje cifrado.")

    aes = AESGCM(key)
    try:
        return aes.decrypt(nonce, ciphertext + tag, aad)
    except InvalidTag:
        logger.warning("aes_gcm_auth_failed", reason="tag")
        raise AuthenticationFailed("No se ha podido autenticar el mensaje cifrado.") from None


def seal(key: bytes, plaintext: bytes, aad: Optional[bytes] = None) -> bytes:
    """Cifra y devuelve el sobre `nonce || ciphertext || tag`."""

    return aes_gcm_encrypt_with_key(key, plaintext, aad).to_envelope()


def open_sealed(key: bytes, envelope: bytes, aad: Optional[bytes] = None) -> bytes:
    """Abre un sobre generado por `seal`.

    Args:
        key (bytes): Clave simétrica usada al sellar.
        envelope (bytes): Sobre `nonce || ciphertext || tag`.
        aad (Optional[bytes]): Datos autenticados adicionales usados al sellar.

    Returns:
        bytes: Mensaje original en claro.

    """

    _check_key(key)
    parts = AesGcmResult.from_envelope(envelope)
    return aes_gcm_decrypt_with_key(key, parts.nonce, parts.ciphertext, parts.tag, aad)
