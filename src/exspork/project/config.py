# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the optional exspork project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_NAME = ".exspork.yaml"
DEFAULT_MANIFEST = "Cargo.toml"
DEFAULT_OUTPUT = "generated_readme.md"


class ProjectConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class ProjectConfig:
    """Settings for README generation in one project directory.

    Attributes:
        manifest: Relative path (from the project directory) to the Cargo manifest.
        declarations: Relative paths to declaration files. Empty means the
            generator discovers ``*.d.ts`` files under ``pkg/``.
        output: Relative path of the generated markdown file.
        title: Heading for the README; the package name is used when unset.
    """

    manifest: str = DEFAULT_MANIFEST
    declarations: list[str] = field(default_factory=list)
    output: str = DEFAULT_OUTPUT
    title: str | None = None


def load_project_config(path: Path) -> ProjectConfig:
    """Load and parse an exspork project configuration file.

    Args:
        path: Path to the ``.exspork.yaml`` file.

    Returns:
        A ProjectConfig instance populated from the file.

    Raises:
        ProjectConfigError: If the file cannot be read or decoded, or the
            configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProjectConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ProjectConfigError(f"Cannot read project config file: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ProjectConfigError(f"Project config file '{path}' is not valid UTF-8: {exc}") from exc

    return _parse_project_config(text, source_label=str(path))


def load_project_config_or_default(directory: Path) -> ProjectConfig:
    """Load ``.exspork.yaml`` from *directory*, or return defaults if absent.

    Raises:
        ProjectConfigError: If the file exists but is invalid.
    """
    config_file = directory / CONFIG_NAME
    if not config_file.exists():
        return ProjectConfig()
    return load_project_config(config_file)


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"manifest", "declarations", "output", "title"})


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig.

    An empty document yields the defaults.

    Raises:
        ProjectConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ProjectConfig()
    if not isinstance(data, dict):
        raise ProjectConfigError(f"{source_label}: project config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ProjectConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    config = ProjectConfig()
    if "manifest" in data:
        config.manifest = _require_string(data, "manifest", source_label)
    if "output" in data:
        config.output = _require_string(data, "output", source_label)
    if "title" in data:
        config.title = _require_string(data, "title", source_label)
    if "declarations" in data:
        config.declarations = _require_string_list(data, "declarations", source_label)
    return config


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a non-empty string field from a mapping, raising ProjectConfigError otherwise."""
    value = mapping[key]
    if not isinstance(value, str):
        raise ProjectConfigError(f"{source_label}: '{key}' must be a string")
    if not value.strip():
        raise ProjectConfigError(f"{source_label}: '{key}' must not be empty")
    return value


def _require_string_list(mapping: dict[str, object], key: str, source_label: str) -> list[str]:
    """Extract a list-of-strings field from a mapping."""
    value = mapping[key]
    if not isinstance(value, list):
        raise ProjectConfigError(f"{source_label}: '{key}' must be a list")
    for index, entry in enumerate(value):
        if not isinstance(entry, str):
            raise ProjectConfigError(f"{source_label}: {key}[{index}] must be a string")
    return list(value)
