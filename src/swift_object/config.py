"""Settings for remote objects and the default transport."""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .constants import (
    ENV_CACHING,
    ENV_INSECURE,
    ENV_TIMEOUT,
    ENV_VERIFY_CONTENT,
    METADATA_HEADER_PREFIX,
)
from .errors import ConfigError

_TRUE_VALUES = ("true", "1", "yes")


class ObjectSettings(BaseModel):
    """Defaults applied to every RemoteObject built with these settings."""
    metadata_prefix: str = METADATA_HEADER_PREFIX
    caching: bool = False
    content_verification: bool = True
    timeout: Optional[float] = Field(default=30.0, gt=0)
    verify_tls: bool = True
    chunk_size: int = Field(default=8192, gt=0)


def _env_flag(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None:
        return None
    return value.strip().lower() in _TRUE_VALUES


def load_settings(path: Optional[Union[str, Path]] = None) -> ObjectSettings:
    """Load settings from an optional YAML file plus environment overrides.

    The file may nest settings under an ``object`` key or keep them flat.
    Environment variables win over the file:

        SWIFT_OBJECT_CACHING, SWIFT_OBJECT_VERIFY_CONTENT,
        SWIFT_OBJECT_TIMEOUT, SWIFT_OBJECT_INSECURE

    Raises:
        ConfigError: If the file is unreadable or holds invalid values
    """
    data = {}
    if path is not None:
        cfg_path = Path(path)
        if not cfg_path.exists():
            raise ConfigError(f"Settings file not found: {cfg_path}")
        try:
            loaded = yaml.safe_load(cfg_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {cfg_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Expected a mapping in {cfg_path}")
        data = dict(loaded.get("object", loaded))

    caching = _env_flag(ENV_CACHING)
    if caching is not None:
        data["caching"] = caching
    verify = _env_flag(ENV_VERIFY_CONTENT)
    if verify is not None:
        data["content_verification"] = verify
    insecure = _env_flag(ENV_INSECURE)
    if insecure is not None:
        data["verify_tls"] = not insecure
    if os.environ.get(ENV_TIMEOUT):
        data["timeout"] = os.environ[ENV_TIMEOUT]

    try:
        return ObjectSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid swift-object settings: {e}") from e
