# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project inputs: the Cargo manifest and the optional exspork configuration."""

from exspork.project.config import (
    CONFIG_NAME,
    DEFAULT_MANIFEST,
    DEFAULT_OUTPUT,
    ProjectConfig,
    ProjectConfigError,
    load_project_config,
    load_project_config_or_default,
)
from exspork.project.manifest import MANIFEST_NAME, Manifest, ManifestError, load_manifest

__all__ = [
    "CONFIG_NAME",
    "DEFAULT_MANIFEST",
    "DEFAULT_OUTPUT",
    "MANIFEST_NAME",
    "Manifest",
    "ManifestError",
    "ProjectConfig",
    "ProjectConfigError",
    "load_manifest",
    "load_project_config",
    "load_project_config_or_default",
]
