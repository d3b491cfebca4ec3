"""Configuration loaded from environment variables (and a .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from onefichier.client import DEFAULT_BASE_URL, FichierClient
from onefichier.exceptions import ConfigurationError

API_KEY_ENV = "FICHIER_API_KEY"
BASE_URL_ENV = "FICHIER_BASE_URL"


@dataclass(frozen=True)
class FichierConfig:
    """Resolved client settings."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL


def get_config(api_key: str | None = None, base_url: str | None = None) -> FichierConfig:
    """Resolve configuration, explicit arguments taking precedence.

    Environment variables:
        FICHIER_API_KEY: API key (required unless api_key is given)
        FICHIER_BASE_URL: API root (default: https://api.1fichier.com/v1)

    Raises:
        ConfigurationError: If no API key is available
    """
    load_dotenv()

    api_key = api_key or os.getenv(API_KEY_ENV)
    if not api_key:
        raise ConfigurationError(f"Missing API key: pass --api-key or set {API_KEY_ENV}")

    return FichierConfig(
        api_key=api_key,
        base_url=base_url or os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL,
    )


def client_from_config(config: FichierConfig) -> FichierClient:
    return FichierClient(config.api_key, config.base_url)
