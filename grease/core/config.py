"""Runtime settings resolved from the environment.

grease has no configuration file. Endpoints can be pointed at a GitHub
Enterprise instance through environment variables; everything else comes
from command-line flags.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from grease import __version__

from .result import Err, Ok, Result

__all__ = [
    "Settings",
    "ConfigError",
    "load_settings",
    "DEFAULT_API_URL",
    "DEFAULT_UPLOADS_URL",
    "API_URL_ENV",
    "UPLOADS_URL_ENV",
]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_UPLOADS_URL = "https://uploads.github.com"

API_URL_ENV = "GREASE_API_URL"
UPLOADS_URL_ENV = "GREASE_UPLOADS_URL"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when an environment setting is unusable."""

    message: str
    variable: str | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Endpoint configuration for the GitHub API."""

    api_url: str = DEFAULT_API_URL
    uploads_url: str = DEFAULT_UPLOADS_URL
    user_agent: str = f"grease/{__version__}"


def _read_url(env: Mapping[str, str], key: str, default: str) -> Result[str, ConfigError]:
    raw = env.get(key, "").strip()
    if not raw:
        return Ok(default)
    if not raw.startswith(("https://", "http://")):
        return Err(ConfigError(message=f"{key} must be an http(s) URL, got {raw!r}", variable=key))
    return Ok(raw.rstrip("/"))


def load_settings(env: Mapping[str, str] | None = None) -> Result[Settings, ConfigError]:
    """Build Settings from environment variables.

    Args:
        env: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Ok with Settings, or Err with ConfigError for a malformed URL
    """
    source = os.environ if env is None else env

    api_url = _read_url(source, API_URL_ENV, DEFAULT_API_URL)
    if isinstance(api_url, Err):
        return api_url

    uploads_url = _read_url(source, UPLOADS_URL_ENV, DEFAULT_UPLOADS_URL)
    if isinstance(uploads_url, Err):
        return uploads_url

    return Ok(Settings(api_url=api_url.value, uploads_url=uploads_url.value))
