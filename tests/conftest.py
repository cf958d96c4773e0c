# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y generar claves.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

from cryptokit.crypto_asym import rsa_generate_keypair
from cryptokit.models import RsaKeyPair


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Fija parámetros Argon2id baratos y recarga cryptokit.config en cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("CRYPTOKIT_KDF_TIME_COST", "1")
    monkeypatch.setenv("CRYPTOKIT_KDF_MEMORY_COST", "1024")
    monkeypatch.setenv("CRYPTOKIT_KDF_PARALLELISM", "1")
    monkeypatch.delenv("CRYPTOKIT_RSA_MIN_KEY_SIZE", raising=False)
    monkeypatch.delenv("CRYPTOKIT_RSA_DEFAULT_KEY_SIZE", raising=False)

    import cryptokit.config as config_module

    importlib.reload(config_module)

    yield
    # Restaura el entorno antes de recargar para no contaminar fixtures de sesión.
    monkeypatch.undo()
    importlib.reload(config_module)


@pytest.fixture(scope="session")
def rsa_pair() -> RsaKeyPair:
    """Par RSA de 2048 bits compartido por toda la sesión de pruebas."""

    return rsa_generate_keypair(2048)


@pytest.fixture(scope="session")
def other_rsa_pair() -> RsaKeyPair:
    """Segundo par RSA independiente para comprobar claves cruzadas."""

    return rsa_generate_keypair(2048)
