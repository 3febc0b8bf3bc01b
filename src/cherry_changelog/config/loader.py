"""
Configuration loader for cherry_changelog.

Project defaults may be stored in a JSON file named
``.cherry-changelog.json`` in the repository root, for example::

    {
      "export": ["json", "markdown"],
      "output": "docs",
      "types": "feat,fix,perf,refactor"
    }

The file is optional. If it exists but is malformed, has unknown keys or
fields of the wrong type, a :class:`ConfigError` is raised. Values given
on the command line always win over the file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from cherry_changelog.render.exporter import EXPORT_FORMATS


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILE_NAME = ".cherry-changelog.json"

DEFAULT_FORMATS = ["json"]
DEFAULT_OUTPUT_DIR = "."
DEFAULT_TYPES = ["feat", "fix", "perf"]
DEFAULT_INPUT = "changelog.json"
DEFAULT_VERSION = "v0.1.0"

# Alternative spellings accepted for export formats
FORMAT_ALIASES = {"md": "markdown"}

_LIST_KEYS = {"export", "types"}
_STRING_KEYS = {"output", "input", "default_version"}
_BOOL_KEYS = {"escape_html"}


class ConfigError(Exception):
    """Raised when the configuration file or an option value is invalid."""

    pass


@dataclass
class ChangelogOptions:
    """Fully resolved settings for one changelog run."""

    formats: List[str] = field(default_factory=lambda: list(DEFAULT_FORMATS))
    output_dir: str = DEFAULT_OUTPUT_DIR
    types: List[str] = field(default_factory=lambda: list(DEFAULT_TYPES))
    input_path: str = DEFAULT_INPUT
    version: Optional[str] = None
    default_version: str = DEFAULT_VERSION
    escape_html: bool = False
    auto_select: bool = False


def parse_csv(value: Union[str, Iterable[str], None]) -> List[str]:
    """Split a comma-separated string (or list of strings) into clean tokens."""
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else list(value)
    return [item.strip() for item in items if item and item.strip()]


def validate_formats(formats: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split requested formats into recognized and unrecognized ones.

    Aliases such as ``md`` are normalized. Order and duplicates of the
    recognized formats are preserved.

    Raises
    ------
    ConfigError
        If none of the requested formats is recognized.
    """
    valid: List[str] = []
    invalid: List[str] = []
    for fmt in formats:
        normalized = FORMAT_ALIASES.get(fmt.lower(), fmt.lower())
        if normalized in EXPORT_FORMATS:
            valid.append(normalized)
        else:
            invalid.append(fmt)
    if not valid:
        raise ConfigError(
            f"No valid export format given (got: {', '.join(invalid) or 'none'}). "
            f"Choose from: {', '.join(EXPORT_FORMATS)}"
        )
    return valid, invalid


def load_config(repo_root: Optional[Path]) -> Dict[str, Any]:
    """Load the project configuration from ``repo_root``.

    Args:
        repo_root: The repository root. If None, or the file does not
                   exist there, an empty configuration is returned.

    Returns:
        A dictionary with a subset of the keys ``export``, ``output``,
        ``types``, ``input``, ``escape_html`` and ``default_version``.

    Raises:
        ConfigError: If the file exists but is malformed or invalid.
    """
    if repo_root is None:
        return {}
    config_path = Path(repo_root) / CONFIG_FILE_NAME
    if not config_path.exists():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return {}

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, ValueError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    unknown = sorted(set(data) - _LIST_KEYS - _STRING_KEYS - _BOOL_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    for key in _LIST_KEYS & set(data):
        value = data[key]
        if isinstance(value, str):
            continue
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigError(f"'{key}' must be a string or a list of strings")
    for key in _STRING_KEYS & set(data):
        if not isinstance(data[key], str):
            raise ConfigError(f"'{key}' must be a string")
    for key in _BOOL_KEYS & set(data):
        if not isinstance(data[key], bool):
            raise ConfigError(f"'{key}' must be a boolean")

    logger.debug("Loaded configuration from: %s", config_path)
    return data


def resolve_options(
    config: Dict[str, Any],
    export: Optional[str] = None,
    output: Optional[str] = None,
    release_version: Optional[str] = None,
    types: Optional[str] = None,
    auto_select: bool = False,
    input_path: Optional[str] = None,
    escape_html: Optional[bool] = None,
) -> ChangelogOptions:
    """Combine command line values, the configuration file and defaults.

    A command line value of ``None`` means "not given". Format names are
    not validated here; see :func:`validate_formats`.
    """
    formats = parse_csv(export) if export is not None else parse_csv(config.get("export", DEFAULT_FORMATS))
    allowed_types = parse_csv(types) if types is not None else parse_csv(config.get("types", DEFAULT_TYPES))
    return ChangelogOptions(
        formats=formats,
        output_dir=output if output is not None else config.get("output", DEFAULT_OUTPUT_DIR),
        types=allowed_types,
        input_path=input_path if input_path is not None else config.get("input", DEFAULT_INPUT),
        version=release_version,
        default_version=config.get("default_version", DEFAULT_VERSION),
        escape_html=escape_html if escape_html is not None else bool(config.get("escape_html", False)),
        auto_select=auto_select,
    )
