# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete cryptokit.
# --------------------------------------------------------------
"""Inicializa el paquete `cryptokit` y documenta sus módulos principales."""

__version__ = "0.3.0"

__all__ = [
    "config",
    "crypto_asym",
    "crypto_hash",
    "crypto_kdf",
    "crypto_random",
    "crypto_sym",
    "encoding",
    "errors",
    "logs",
    "models",
    "services",
]
