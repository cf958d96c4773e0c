# --------------------------------------------------------------
# File: test_services.py
# Description: Pruebas de los servicios de texto sobre hash, AES-GCM y RSA.
# --------------------------------------------------------------

import json

import pytest

from cryptokit.crypto_asym import rsa_generate_keypair
from cryptokit.crypto_hash import HashAlgorithm
from cryptokit.crypto_sym import generate_aes_key
from cryptokit.encoding import from_base64, to_base64
from cryptokit.errors import AuthenticationFailed, DecryptionFailed, InvalidEncoding
from cryptokit.services import (
    content_fingerprint,
    decrypt_text,
    decrypt_with_passphrase,
    encrypt_text,
    encrypt_with_passphrase,
    rsa_decrypt_text,
    rsa_encrypt_text,
)


def test_encrypt_text_roundtrip_unicode():
    """Comprueba el cifrado de texto con caracteres no ASCII.

    Returns:
        None: La aserción compara el texto recuperado.
    """
    key = generate_aes_key()
    token = encrypt_text(key, "안녕하세요, señor")
    assert decrypt_text(key, token) == "안녕하세요, señor"


def test_decrypt_text_with_wrong_key_or_tampering():
    """Verifica el rechazo con otra clave o un token alterado.

    Returns:
        None: Se espera AuthenticationFailed en ambos casos.
    """
    key = generate_aes_key()
    token = encrypt_text(key, "hello world", aad=b"ctx")
    with pytest.raises(AuthenticationFailed):
        decrypt_text(generate_aes_key(), token, aad=b"ctx")

    raw = bytearray(from_base64(token))
    raw[-1] ^= 0x80
    with pytest.raises(AuthenticationFailed):
        decrypt_text(key, to_base64(bytes(raw)), aad=b"ctx")


def test_decrypt_text_rejects_non_base64():
    """Comprueba que un token no Base64 falle con InvalidEncoding.

    Returns:
        None: Se espera InvalidEncoding.
    """
    with pytest.raises(InvalidEncoding):
        decrypt_text(generate_aes_key(), "no*base64")


def test_passphrase_envelope_roundtrip():
    """Valida el documento cifrado con passphrase y su estructura JSON.

    Returns:
        None: Las aserciones revisan campos y descifrado.
    """
    document = encrypt_with_passphrase("Tr3s-Tristes-Tigres", b"user secret")
    parsed = json.loads(document)
    assert set(parsed) == {"version", "salt", "kdf_params", "nonce", "tag", "ct"}
    assert parsed["kdf_params"]["alg"] == "argon2id"
    assert "=" not in parsed["nonce"]
    assert decrypt_with_passphrase("Tr3s-Tristes-Tigres", document) == b"user secret"


def test_passphrase_envelope_wrong_passphrase():
    """Comprueba que una passphrase incorrecta no descifre los datos.

    Returns:
        None: Se espera AuthenticationFailed.
    """
    document = encrypt_with_passphrase("correcta-123", b"data")
    with pytest.raises(AuthenticationFailed):
        decrypt_with_passphrase("incorrecta-123", document)


@pytest.mark.parametrize("document", ["{not json", "{}", '{"salt": 1}'])
def test_passphrase_envelope_malformed(document):
    """Verifica que documentos mal formados se reporten como InvalidEncoding.

    Returns:
        None: Se espera InvalidEncoding.
    """
    with pytest.raises(InvalidEncoding):
        decrypt_with_passphrase("x", document)


@pytest.mark.parametrize(
    "field,changes",
    [
        ("kdf_params", {"p": 4, "m": 8}),
        ("kdf_params", {"outlen": 17}),
        ("kdf_params", {"m": 64 * 1024 * 1024}),
        ("kdf_params", {"t": 10_000}),
        ("kdf_params", {"p": 0}),
        ("kdf_params", {"alg": "argon2i"}),
        ("salt", "AAAA"),
        ("salt", ""),
        ("version", 2),
    ],
)
def test_passphrase_envelope_tampered_fields(field, changes):
    """Comprueba que campos manipulados del documento no lleguen a Argon2id.

    Args:
        field (str): Campo del documento que se altera.
        changes (object): Nuevo valor o actualización de los parámetros KDF.

    Returns:
        None: Se espera InvalidEncoding para cada alteración.
    """
    parsed = json.loads(encrypt_with_passphrase("correcta-123", b"data"))
    if isinstance(changes, dict):
        parsed[field].update(changes)
    else:
        parsed[field] = changes
    with pytest.raises(InvalidEncoding):
        decrypt_with_passphrase("correcta-123", json.dumps(parsed))


def test_rsa_text_roundtrip(rsa_pair):
    """Comprueba el cifrado RSA de texto en Base64.

    Returns:
        None: La aserción compara el texto recuperado.
    """
    token = rsa_encrypt_text(rsa_pair.public_pem, "clave de sesión")
    assert len(from_base64(token)) == 256
    assert rsa_decrypt_text(rsa_pair.private_pem, token) == "clave de sesión"


def test_rsa_text_with_encrypted_private_pem():
    """Valida el descifrado de texto con un PEM privado protegido por passphrase.

    Returns:
        None: La aserción compara el texto recuperado.
    """
    pair = rsa_generate_keypair(2048, passphrase="pem-secreto")
    token = rsa_encrypt_text(pair.public_pem, "hola")
    assert rsa_decrypt_text(pair.private_pem, token, passphrase="pem-secreto") == "hola"


def test_rsa_text_bad_token_is_generic_failure(rsa_pair):
    """Garantiza que un token corrupto produzca el fallo genérico.

    Returns:
        None: Se espera DecryptionFailed.
    """
    with pytest.raises(DecryptionFailed):
        rsa_decrypt_text(rsa_pair.private_pem, "%%%")
    with pytest.raises(DecryptionFailed):
        rsa_decrypt_text(rsa_pair.private_pem, to_base64(bytes(256)))


def test_content_fingerprint():
    """Valida la huella hexadecimal completa y truncada.

    Returns:
        None: Las aserciones comparan longitudes y prefijos.
    """
    full = content_fingerprint("")
    assert full == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert content_fingerprint(b"", length=8) == "e3b0c442"
    assert len(content_fingerprint("x", HashAlgorithm.SHA512)) == 128
    with pytest.raises(ValueError):
        content_fingerprint("x", length=0)
    with pytest.raises(ValueError):
        content_fingerprint("x", length=65)
