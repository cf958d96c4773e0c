import os
from dotenv import load_dotenv
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


RSA_MIN_KEY_SIZE = int(os.getenv("CRYPTOKIT_RSA_MIN_KEY_SIZE", "2048"))
RSA_DEFAULT_KEY_SIZE = int(os.getenv("CRYPTOKIT_RSA_DEFAULT_KEY_SIZE", "3072"))

# Parámetros Argon2id por defecto (memoria en KiB).
KDF_TIME_COST = int(os.getenv("CRYPTOKIT_KDF_TIME_COST", "3"))
KDF_MEMORY_COST = int(os.getenv("CRYPTOKIT_KDF_MEMORY_COST", str(64 * 1024)))
KDF_PARALLELISM = int(os.getenv("CRYPTOKIT_KDF_PARALLELISM", "1"))

LOG_LEVEL = os.getenv("CRYPTOKIT_LOG_LEVEL", "WARNING").upper()
LOG_JSON = _env_bool("CRYPTOKIT_LOG_JSON", "false")
