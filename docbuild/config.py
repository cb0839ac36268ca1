"""Configuration loading for docbuild (.docbuild.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".docbuild.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


class _TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as written; only nulls are resolved.

    ``version_number: 1.10`` stays ``"1.10"`` instead of becoming a float.
    """


_TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == "tag:yaml.org,2002:null"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass
class CoreConfig:
    """Project settings copied onto the model by the parse-project step."""

    input_file: str
    doc_language: Optional[str] = None
    logo_path: Optional[str] = None
    author: Optional[str] = None
    project_name: Optional[str] = None
    version_number: Optional[str] = None
    project_url: Optional[str] = None
    author_url: Optional[str] = None

    @property
    def project_root(self) -> Path:
        """Directory holding the input file; all discovery is relative to it."""
        return Path(self.input_file).parent


def load_config(config_path: Path) -> CoreConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)

    if not config_file.exists():
        return CoreConfig(input_file="")

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    section = _as_dict(data.get("project")) or data
    input_file = _as_str(section.get("input_file"))
    if input_file and not Path(input_file).is_absolute():
        input_file = str(config_file.parent / input_file)

    return CoreConfig(
        input_file=input_file or "",
        doc_language=_as_str(section.get("doc_language")),
        logo_path=_as_str(section.get("logo_path")),
        author=_as_str(section.get("author")),
        project_name=_as_str(section.get("project_name")),
        version_number=_as_str(section.get("version_number")),
        project_url=_as_str(section.get("project_url")),
        author_url=_as_str(section.get("author_url")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.load(text, Loader=_TextScalarLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


__all__ = ["CONFIG_FILENAME", "ConfigError", "CoreConfig", "load_config"]
