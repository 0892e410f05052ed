# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Package manifest model and Cargo.toml reader."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

# ###############
# Public Interface
# ###############

MANIFEST_NAME = "Cargo.toml"


class ManifestError(Exception):
    """Raised when the manifest cannot be read or does not describe a package."""


class Manifest(BaseModel):
    """The ``[package]`` table of a Cargo manifest.

    Only the keys used for documentation are modelled; other keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    version: str
    license: str | None = None
    description: str | None = None
    repository: str | None = None


def load_manifest(path: Path) -> Manifest:
    """Load the package metadata from a Cargo manifest.

    Args:
        path: Path to the ``Cargo.toml`` file.

    Returns:
        A validated Manifest instance.

    Raises:
        ManifestError: If the file cannot be read or decoded, contains invalid TOML,
            has no ``[package]`` table, or the table is missing required keys.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestError(f"Manifest not found: {path}") from None
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest '{path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(f"Manifest '{path}' is not valid UTF-8: {exc}") from exc

    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(f"Invalid TOML in manifest '{path}': {exc}") from exc

    package = data.get("package")
    if not isinstance(package, dict):
        raise ManifestError(f"{path}: missing [package] table")

    try:
        return Manifest.model_validate(package)
    except ValidationError as exc:
        raise ManifestError(f"Invalid [package] table in '{path}': {exc}") from exc
