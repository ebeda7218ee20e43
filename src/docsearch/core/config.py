"""
Search Service Configuration

Search and HTTP API settings. Inherits infrastructure settings.
"""

import os

from docsearch.core.constants import DEFAULT_CONTEXT_RADIUS, MAX_MATCHES_PER_PAGE
from docsearch.core.infrastructure_config import InfrastructureSettings


class Settings(InfrastructureSettings):
    """Search service configuration"""

    # Application
    APP_NAME: str = "Document Search"
    APP_VERSION: str = "0.1.0"

    # Search Settings
    SNIPPET_CONTEXT_RADIUS: int = int(
        os.getenv("SNIPPET_CONTEXT_RADIUS", str(DEFAULT_CONTEXT_RADIUS))
    )
    MAX_MATCHES_PER_PAGE: int = int(
        os.getenv("MAX_MATCHES_PER_PAGE", str(MAX_MATCHES_PER_PAGE))
    )
    MAX_QUERY_LEN: int = int(os.getenv("MAX_QUERY_LEN", "200"))

    # Rate limiting (slowapi limit string)
    RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    SEARCH_RATE_LIMIT: str = os.getenv("SEARCH_RATE_LIMIT", "120/minute")

    # Security
    ALLOWED_HOSTS: list[str] = os.getenv(
        "ALLOWED_HOSTS", "localhost,127.0.0.1,testclient,testserver"
    ).split(",")
    CORS_ORIGINS: list[str] = (
        os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else []
    )

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"


settings = Settings()


def _validate(settings: Settings) -> None:
    """Reject settings the search core cannot honour."""
    if settings.SNIPPET_CONTEXT_RADIUS < 0:
        raise RuntimeError("SNIPPET_CONTEXT_RADIUS must be >= 0")
    if settings.MAX_MATCHES_PER_PAGE < 1:
        raise RuntimeError("MAX_MATCHES_PER_PAGE must be >= 1")


_validate(settings)
