"""Configuration loading for include-docs (.include-docs.yml)."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import IncludeDocsError, PathLike
from .forms import FORM_NAMES

CONFIG_FILENAME = ".include-docs.yml"


class ConfigError(IncludeDocsError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class FormsConfig:
    """Which doc forms are recognized, in matching order."""

    enabled: List[str] = field(default_factory=lambda: list(FORM_NAMES))


@dataclass
class PathsConfig:
    """Path resolution overrides."""

    base_dir: Optional[Path] = None


@dataclass
class Config:
    """Represents the settings defined in .include-docs.yml."""

    encoding: str = "utf-8"
    forms: FormsConfig = field(default_factory=FormsConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)


def load_config(config_path: PathLike) -> Config:
    """Load configuration from a directory or config file path; defaults when absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent

    if not config_file.is_file():
        return Config()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    encoding = _as_str(data.get("encoding")) or "utf-8"
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding in {config_file}: {encoding}") from exc

    forms = FormsConfig()
    forms_data = _as_dict(data.get("forms"))
    if "enabled" in forms_data:
        enabled = [name.strip().lower() for name in _as_str_list(forms_data.get("enabled"))]
        unknown = sorted(set(enabled) - set(FORM_NAMES))
        if unknown:
            raise ConfigError(
                f"Unknown doc forms in {config_file}: {', '.join(unknown)} "
                f"(expected any of {', '.join(FORM_NAMES)})"
            )
        if not enabled:
            raise ConfigError(f"forms.enabled in {config_file} must name at least one form")
        forms.enabled = enabled

    paths = PathsConfig()
    paths_data = _as_dict(data.get("paths"))
    base_dir = _as_str(paths_data.get("base_dir"))
    if base_dir:
        paths.base_dir = (root / Path(base_dir).expanduser()).resolve()

    return Config(encoding=encoding, forms=forms, paths=paths)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "Config", "ConfigError", "FormsConfig", "PathsConfig", "load_config"]
