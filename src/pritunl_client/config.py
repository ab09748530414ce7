"""
Client configuration management.

This module builds the connection settings for a Pritunl client from multiple
sources with the following precedence (highest to lowest):

    1. Explicit keyword overrides passed to ``load_config()``
    2. Environment variables (PRITUNL_URL, PRITUNL_TOKEN, ...)
    3. The ``[pritunl]`` section of an INI file
    4. Built-in defaults

The configuration is immutable once created.

Usage:
    from pritunl_client.config import load_config

    config = load_config()                         # env only
    config = load_config("pritunl.ini")            # file + env
    config = load_config(insecure=True)            # env + explicit override

INI format:
    [pritunl]
    url = https://vpn.example.com
    token = 0123456789abcdef
    secret = fedcba9876543210
    insecure = false
    timeout = 30

Environment Variable Mapping:
    PRITUNL_URL       -> url
    PRITUNL_TOKEN     -> token
    PRITUNL_SECRET    -> secret
    PRITUNL_INSECURE  -> insecure
    PRITUNL_TIMEOUT   -> timeout
    PRITUNL_CONFIG    -> INI file path, when none is passed explicitly
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# =============================================================================
# DEFAULT CONFIGURATION VALUES
# =============================================================================

# Default HTTP request timeout in seconds. Server creation can take a while
# on a busy host because it generates DH parameters.
DEFAULT_TIMEOUT = 30.0

CONFIG_SECTION = "pritunl"

ENV_URL = "PRITUNL_URL"
ENV_TOKEN = "PRITUNL_TOKEN"
ENV_SECRET = "PRITUNL_SECRET"
ENV_INSECURE = "PRITUNL_INSECURE"
ENV_TIMEOUT = "PRITUNL_TIMEOUT"
ENV_CONFIG_FILE = "PRITUNL_CONFIG"


# =============================================================================
# CONFIGURATION DATACLASS
# =============================================================================


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable connection settings for a Pritunl client.

    Attributes:
        url: Base URL of the Pritunl API (e.g. "https://vpn.example.com").
             A trailing slash is stripped.
        token: API token of an administrator.
        secret: API secret paired with the token.
        insecure: Skip TLS certificate verification (self-signed lab setups).
        timeout: HTTP request timeout in seconds, applied to every call.
    """

    url: str
    token: str
    secret: str
    insecure: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """
        Validate configuration values after initialization.

        Raises:
            ValueError: If url, token or secret is empty, or timeout is not positive.
        """
        if not self.url:
            raise ValueError("url cannot be empty")
        if not self.token:
            raise ValueError("token cannot be empty")
        if not self.secret:
            raise ValueError("secret cannot be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number")

        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "url", self.url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"ClientConfig(url={self.url!r}, token={self.token!r}, secret='***', "
            f"insecure={self.insecure!r}, timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls) -> ClientConfig:
        """
        Create a ClientConfig from environment variables only.

        Raises:
            ValueError: If a required variable is missing or invalid.
        """
        return load_config(path=None, use_env_file=False)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_bool(value: str) -> bool:
    """Parse a string value to boolean."""
    return value.strip().lower() in ("true", "yes", "1", "on", "enabled")


def _load_from_ini(parser: configparser.ConfigParser, values: dict[str, Any]) -> None:
    """Load settings from the ``[pritunl]`` section of a parsed INI file."""
    if not parser.has_section(CONFIG_SECTION):
        return

    for key in ("url", "token", "secret"):
        if parser.has_option(CONFIG_SECTION, key):
            values[key] = parser.get(CONFIG_SECTION, key)
    if parser.has_option(CONFIG_SECTION, "insecure"):
        values["insecure"] = _parse_bool(parser.get(CONFIG_SECTION, "insecure"))
    if parser.has_option(CONFIG_SECTION, "timeout"):
        values["timeout"] = parser.getfloat(CONFIG_SECTION, "timeout")


def _apply_env_overrides(values: dict[str, Any]) -> None:
    """Apply environment variable overrides."""
    if env_url := os.getenv(ENV_URL):
        values["url"] = env_url
    if env_token := os.getenv(ENV_TOKEN):
        values["token"] = env_token
    if env_secret := os.getenv(ENV_SECRET):
        values["secret"] = env_secret
    if env_insecure := os.getenv(ENV_INSECURE):
        values["insecure"] = _parse_bool(env_insecure)
    if env_timeout := os.getenv(ENV_TIMEOUT):
        try:
            values["timeout"] = float(env_timeout)
        except ValueError as e:
            raise ValueError(f"{ENV_TIMEOUT} must be a number, got {env_timeout!r}") from e


def load_config(
    path: str | Path | None = None,
    *,
    use_env_file: bool = True,
    **overrides: Any,
) -> ClientConfig:
    """
    Load client configuration from all sources with proper priority.

    Args:
        path: Optional INI file. When omitted and ``use_env_file`` is true,
              the path in PRITUNL_CONFIG is used if set.
        use_env_file: Whether to honour PRITUNL_CONFIG.
        **overrides: Explicit values (url, token, secret, insecure, timeout)
                     that win over every other source. ``None`` values are
                     ignored.

    Returns:
        ClientConfig: Fully populated configuration object.

    Raises:
        FileNotFoundError: If an explicitly named INI file does not exist.
        ValueError: If a required setting is missing or a value is invalid.
    """
    values: dict[str, Any] = {
        "url": "",
        "token": "",
        "secret": "",
        "insecure": False,
        "timeout": DEFAULT_TIMEOUT,
    }

    config_file: Path | None = Path(path) if path is not None else None
    if config_file is None and use_env_file and (env_file := os.getenv(ENV_CONFIG_FILE)):
        config_file = Path(env_file)

    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, values)

    _apply_env_overrides(values)

    unknown = set(overrides) - set(values)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    values.update({key: value for key, value in overrides.items() if value is not None})

    return ClientConfig(**values)
