# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""README generation pipeline: manifest, declaration files, markdown output."""

from exspork.generator.build import (
    DECLARATION_SUFFIX,
    DISCOVERY_DIRECTORY,
    WASM_MODULE_SUFFIX,
    GenerationError,
    GenerationResult,
    find_declaration_files,
    generate_readme,
    read_declaration_file,
)

__all__ = [
    "DECLARATION_SUFFIX",
    "DISCOVERY_DIRECTORY",
    "WASM_MODULE_SUFFIX",
    "GenerationError",
    "GenerationResult",
    "find_declaration_files",
    "generate_readme",
    "read_declaration_file",
]
