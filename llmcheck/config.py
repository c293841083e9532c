"""User configuration: ``~/.llmcheck/config.json`` plus environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import LLMCheckError
from .hardware import PROBE_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_REMOTE_LIMIT = 50


def config_dir() -> Path:
    """``$LLMCHECK_HOME`` or ``~/.llmcheck``."""
    home = os.environ.get("LLMCHECK_HOME", "")
    return Path(home) if home else Path.home() / ".llmcheck"


def _config_path() -> Path:
    return config_dir() / "config.json"


def load_config() -> dict[str, Any]:
    """Load the local config. Missing or corrupt files yield ``{}``."""
    path = _config_path()
    if path.exists():
        try:
            data = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", path, exc)
            return {}
        return data if isinstance(data, dict) else {}
    return {}


def save_config(config: dict[str, Any]) -> None:
    """Persist config to ``config.json`` under :func:`config_dir`."""
    path = _config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2) + "\n")
    path.chmod(0o600)


_TRUE_STRINGS = ("1", "true", "yes", "on")


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name, "")
    if not value:
        return None
    return _parse_flag(value)


@dataclass
class Settings:
    """Resolved settings: environment beats config file beats defaults."""

    probe_timeout: float = PROBE_TIMEOUT
    offline: bool = False
    remote_catalog_limit: int = DEFAULT_REMOTE_LIMIT
    scoring: dict[str, Any] = field(default_factory=dict)
    cache_dir: Path = field(default_factory=config_dir)

    @classmethod
    def load(cls) -> Settings:
        raw = load_config()
        try:
            settings = cls(
                probe_timeout=float(raw.get("probe_timeout", PROBE_TIMEOUT)),
                offline=_parse_flag(raw.get("offline", False)),
                remote_catalog_limit=int(
                    raw.get("remote_catalog_limit", DEFAULT_REMOTE_LIMIT)
                ),
                scoring=dict(raw.get("scoring") or {}),
            )
        except (TypeError, ValueError) as exc:
            raise LLMCheckError(f"invalid config value: {exc}") from exc

        env_timeout = os.environ.get("LLMCHECK_PROBE_TIMEOUT", "")
        if env_timeout:
            try:
                settings.probe_timeout = float(env_timeout)
            except ValueError as exc:
                raise LLMCheckError(
                    f"LLMCHECK_PROBE_TIMEOUT must be a number, got {env_timeout!r}"
                ) from exc
        offline = _env_flag("LLMCHECK_OFFLINE")
        if offline is not None:
            settings.offline = offline
        if settings.probe_timeout <= 0:
            raise LLMCheckError("probe_timeout must be positive")
        return settings
