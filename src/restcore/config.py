"""Client configuration loading and credential resolution.

This module handles everything a :class:`~restcore.client.RestClient` reads
from outside the process:

* **Config files** -- :func:`load_config` reads a JSON or YAML file into a
  :class:`~restcore.models.ClientConfig`.
* **Precedence resolution** -- :func:`resolve_config` layers environment
  variables over the config file over built-in defaults.
* **Credential resolution** -- :func:`resolve_credential` reads secrets from
  environment variables, files, or literal values.

Every failure is reported as :class:`~restcore.exceptions.ConfigurationError`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from restcore.exceptions import ConfigurationError
from restcore.models import ClientConfig

ENV_CONFIG = "RESTCORE_CONFIG"
ENV_FORMAT = "RESTCORE_FORMAT"
ENV_TIMEOUT = "RESTCORE_TIMEOUT"
ENV_VERIFY_SSL = "RESTCORE_VERIFY_SSL"

_FALSE_VALUES = ("0", "false", "no", "off")


# --- Config files ---


def _parse_config_text(text: str, suffix: str) -> Any:
    """Parse config text as YAML for .yaml/.yml files, JSON otherwise."""
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)


def load_config(path: Union[str, Path]) -> ClientConfig:
    """Load and validate a client config file.

    Args:
        path: A ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        The validated :class:`~restcore.models.ClientConfig`.

    Raises:
        ConfigurationError: If the file is missing, cannot be parsed, or
            fails validation.
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
        data = _parse_config_text(text, path.suffix.lower())
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Invalid config at {path}: {exc}") from exc
    try:
        return ClientConfig.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config at {path}: {exc}") from exc


# --- Precedence resolution ---


def resolve_config(path: Optional[Union[str, Path]] = None) -> ClientConfig:
    """Resolve the effective client config.

    Precedence (high to low):
        1. Environment variables (``RESTCORE_FORMAT``, ``RESTCORE_TIMEOUT``,
           ``RESTCORE_VERIFY_SSL``)
        2. The config file at *path*, or at ``$RESTCORE_CONFIG``
        3. Defaults

    Args:
        path: Explicit config file path.

    Returns:
        The merged :class:`~restcore.models.ClientConfig`.

    Raises:
        ConfigurationError: If the config file or an override is invalid.
    """
    config_path = path or os.environ.get(ENV_CONFIG)
    config = load_config(config_path) if config_path else ClientConfig()

    env_format = os.environ.get(ENV_FORMAT)
    if env_format:
        config.format = None if env_format.lower() == "none" else env_format

    env_timeout = os.environ.get(ENV_TIMEOUT)
    if env_timeout:
        try:
            config.transport.timeout = float(env_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"{ENV_TIMEOUT} must be a number of seconds, got '{env_timeout}'"
            ) from exc

    env_verify = os.environ.get(ENV_VERIFY_SSL)
    if env_verify:
        config.transport.verify_ssl = env_verify.lower() not in _FALSE_VALUES

    return config


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - ``"value:literal"`` -- the literal text after the prefix

    Args:
        source: The source descriptor string.

    Returns:
        The resolved credential string.

    Raises:
        ConfigurationError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigurationError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigurationError(f"Cannot read credential file {path}: {exc}") from exc

    if source.startswith("value:"):
        return source[6:]

    raise ConfigurationError(f"Unknown credential source format: {source}")
