"""
YAML configuration loader.

Search precedence (first match wins)
1. An explicit path argument (``--config`` on the CLI).
2. ``$CHAOSDUMP_CONFIG``.
3. ``./chaosdump.yaml`` in the current working directory.
4. The packaged default shipped inside the wheel.

``$CHAOSDUMP_TIMEOUT`` overrides the ``timeout`` key of whichever file wins.
"""

from __future__ import annotations

import os
from importlib.resources import as_file, files
from pathlib import Path
from typing import Optional

import yaml

from .schema import ChaosConfig

_DEFAULT_CONFIG = files("chaosdump.resources") / "default_config.yaml"
_LOCAL_NAME = "chaosdump.yaml"


def _first_existing(*candidates: Optional[Path]) -> Optional[Path]:
    """Return the first path in *candidates* that exists on disk."""
    for p in candidates:
        if p is not None and p.exists():
            return p
    return None


def _load_yaml(path: Path) -> dict:
    """Read a YAML file; an empty document yields an empty dict."""
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def _env_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    return Path(value).expanduser() if value else None


def load_config(*, config_path: Optional[str | Path] = None) -> ChaosConfig:
    """Return a fully validated :class:`ChaosConfig`.

    Args:
        config_path: Explicit YAML path. Must exist when given.

    Returns:
        A :class:`ChaosConfig` ready for downstream use.

    Raises:
        FileNotFoundError: When *config_path* is given but missing.
        RuntimeError: When the YAML fails to parse or to validate.
    """
    explicit = Path(config_path).expanduser() if config_path else None
    if explicit is not None and not explicit.exists():
        raise FileNotFoundError(f"Config file not found: {explicit}")

    resolved = _first_existing(
        explicit, _env_path("CHAOSDUMP_CONFIG"), Path.cwd() / _LOCAL_NAME
    )
    try:
        if resolved is None:
            with as_file(_DEFAULT_CONFIG) as p:
                data = _load_yaml(Path(p))
        else:
            data = _load_yaml(resolved)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid configuration – {exc}") from exc

    if not isinstance(data, dict):
        raise RuntimeError(
            f"Invalid configuration – expected a mapping, got {type(data).__name__}"
        )

    timeout = os.environ.get("CHAOSDUMP_TIMEOUT")
    if timeout:
        data["timeout"] = timeout

    try:
        return ChaosConfig(**data)
    except Exception as exc:  # pydantic.ValidationError
        raise RuntimeError(f"Invalid configuration – {exc}") from exc
