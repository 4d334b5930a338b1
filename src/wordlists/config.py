"""
YAML configuration for wordlist managers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from wordlists.exceptions import ConfigError
from wordlists.models import Backend


@dataclass
class WordlistsConfig:
    """Directories to scan, exposure policy and enabled backends."""

    paths: list[Path] = field(default_factory=list)
    policy: str = ""
    backends: tuple[Backend, ...] = (Backend.TEXT, Backend.STORE)


def load_config(
    source: str | Path | dict[str, Any],
) -> WordlistsConfig:
    """Load a configuration from a YAML file, YAML string or dictionary.

    Args:
        source: Path to YAML file, YAML string, or parsed dictionary

    Returns:
        WordlistsConfig object

    Raises:
        ConfigError: If the configuration cannot be parsed or is invalid
        FileNotFoundError: If the file does not exist
    """
    base: Path | None = None

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        source_path = Path(source)
        if not source_path.exists():
            raise FileNotFoundError(f"File not found: {source_path}")
        base = source_path.parent
        data = _load_yaml(source_path.read_text(encoding="utf-8"))
    else:
        # Assume it's a YAML string
        data = _load_yaml(source)

    return _parse_config(data, base)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(s: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(s)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise ConfigError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")
    return data


def _parse_config(data: dict[str, Any], base: Path | None) -> WordlistsConfig:
    """Parse a dictionary into a WordlistsConfig object."""
    paths = data.get("paths") or []
    if isinstance(paths, str):
        paths = [paths]
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ConfigError("Field 'paths' must be a list of strings")
    resolved = []
    for p in paths:
        path = Path(p).expanduser()
        # Relative paths are relative to the configuration file.
        if base is not None and not path.is_absolute():
            path = base / path
        resolved.append(path)

    policy = data.get("policy", "")
    if policy is None:
        policy = ""
    elif isinstance(policy, list):
        if not all(isinstance(p, str) for p in policy):
            raise ConfigError("Field 'policy' must be a string or a list of strings")
        policy = " ".join(policy)
    elif not isinstance(policy, str):
        raise ConfigError("Field 'policy' must be a string or a list of strings")

    backends_data = data.get("backends")
    if backends_data is None:
        backends = (Backend.TEXT, Backend.STORE)
    else:
        if not isinstance(backends_data, list) or not backends_data:
            raise ConfigError("Field 'backends' must be a non-empty list")
        try:
            backends = tuple(Backend(str(b).lower()) for b in backends_data)
        except ValueError as e:
            valid = ", ".join(b.value for b in Backend)
            raise ConfigError(f"Unknown backend in 'backends' (valid: {valid})") from e

    return WordlistsConfig(paths=resolved, policy=policy, backends=backends)
