"""
Infrastructure Configuration

Base configuration for infrastructure-level settings: environment,
data paths, the document catalog and the persistent index cache.
"""

import os
from enum import Enum
from pathlib import Path


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable."""
    env_value = os.getenv("ENVIRONMENT")
    if env_value is None:
        raise RuntimeError(
            "ENVIRONMENT is required. Set to 'production', 'development', or 'test'."
        )
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class InfrastructureSettings:
    """Infrastructure-level configuration (catalog, cache, paths)"""

    # Project Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"

    # Document catalog (JSON list of {id, title, path})
    CATALOG_PATH: str = os.getenv("CATALOG_PATH", str(DATA_DIR / "catalog.json"))

    # Persistent index cache (SQLite). Best-effort: failures never block indexing.
    INDEX_CACHE_DB: str = os.getenv(
        "INDEX_CACHE_DB", str(DATA_DIR / "index_cache.db")
    )
    INDEX_CACHE_ENABLED: bool = _get_bool("INDEX_CACHE_ENABLED", "true")

    # Keep pages extracted before a document fails to parse
    KEEP_PARTIAL_DOCUMENTS: bool = _get_bool("KEEP_PARTIAL_DOCUMENTS", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Environment
    ENVIRONMENT: Environment = _get_environment()


settings = InfrastructureSettings()
