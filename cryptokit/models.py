# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cryptokit.errors import AuthenticationFailed

NONCE_SIZE = 12
TAG_SIZE = 16

# Cotas de Argon2id aceptadas al leer documentos ajenos (memoria en KiB).
KDF_MAX_TIME_COST = 10
KDF_MAX_MEMORY_COST = 256 * 1024
KDF_MAX_PARALLELISM = 16
KDF_OUTPUT_SIZES = (16, 24, 32)


class AesGcmResult(BaseModel):
    """Representa el resultado de una operación AES-GCM.

    Attributes:
        nonce (bytes): Vector de inicialización de 96 bits utilizado al cifrar.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits generada por AES-GCM.

    """

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    ciphertext: bytes
    tag: bytes

    def to_envelope(self) -> bytes:
        """Serializa el resultado como `nonce || ciphertext || tag`."""

        return self.nonce + self.ciphertext + self.tag

    @classmethod
    def from_envelope(cls, envelope: bytes) -> "AesGcmResult":
        """Reconstruye el resultado a partir de su forma serializada.

        Args:
            envelope (bytes): Sobre con nonce, ciphertext y tag concatenados.

        Returns:
            AesGcmResult: Componentes separados del sobre.

        Raises:
            AuthenticationFailed: Si el sobre es más corto que nonce + tag.

        """
        if len(envelope) < NONCE_SIZE + TAG_SIZE:
            raise AuthenticationFailed("El sobre cifrado está truncado.")
        return cls(
            nonce=envelope[:NONCE_SIZE],
            ciphertext=envelope[NONCE_SIZE:-TAG_SIZE],
            tag=envelope[-TAG_SIZE:],
        )


class RsaKeyPair(BaseModel):
    """Par de claves RSA serializado en PEM.

    Attributes:
        private_pem (bytes): Clave privada PKCS8, cifrada si se usó passphrase.
        public_pem (bytes): Clave pública SubjectPublicKeyInfo.
        key_size (int): Tamaño del módulo en bits.

    """

    model_config = ConfigDict(frozen=True)

    private_pem: bytes
    public_pem: bytes
    key_size: int


class KdfParams(BaseModel):
    """Parámetros Argon2id necesarios para volver a derivar la clave."""

    model_config = ConfigDict(frozen=True)

    t: int = Field(ge=1, le=KDF_MAX_TIME_COST)
    m: int = Field(ge=8, le=KDF_MAX_MEMORY_COST)
    p: int = Field(ge=1, le=KDF_MAX_PARALLELISM)
    outlen: int
    alg: Literal["argon2id"] = "argon2id"

    @field_validator("outlen")
    @classmethod
    def _check_outlen(cls, value: int) -> int:
        if value not in KDF_OUTPUT_SIZES:
            raise ValueError("outlen debe ser 16, 24 o 32 bytes")
        return value

    @model_validator(mode="after")
    def _check_memory_per_lane(self) -> "KdfParams":
        # Argon2 exige al menos 8 KiB por carril.
        if self.m < 8 * self.p:
            raise ValueError("m debe ser al menos 8 * p")
        return self


class PassphraseEnvelope(BaseModel):
    """Documento JSON de datos cifrados con una clave derivada de passphrase.

    Los campos binarios se guardan en Base64 URL-safe sin relleno.
    """

    model_config = ConfigDict(frozen=True)

    version: Literal[1] = 1
    salt: str
    kdf_params: KdfParams
    nonce: str
    tag: str
    ct: str
