# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Markdown README generation from package metadata and parsed functions.

The document contains, in order:
- A title heading (the package name unless overridden) and the version.
- The package description, if the manifest has one.
- An ``API`` section with one entry per exported function, giving its
  signature, an argument table, and the return type. The section is omitted
  when there are no functions.
- A ``License`` section, if the manifest declares a license.

Every heading, paragraph and table is its own block, and blocks are separated
by a blank line so that a table never absorbs the line that follows it.
"""

from __future__ import annotations

from collections.abc import Iterable

from exspork.model.entities import Function
from exspork.project.manifest import Manifest
from exspork.rendering.display import format_function, format_type

# ###############
# Public Interface
# ###############


def generate_markdown(
    manifest: Manifest,
    functions: Iterable[Function],
    title: str | None = None,
) -> str:
    """Render a README for *manifest* documenting *functions* in the given order.

    Args:
        manifest: Package metadata from the Cargo manifest.
        functions: Parsed functions, typically concatenated across declaration files.
        title: Optional heading; defaults to the package name when ``None``.

    Returns:
        The markdown text, ending with a newline.
    """
    blocks: list[str] = [
        f"# {title if title is not None else manifest.name}",
        f"### Version: {manifest.version}",
    ]
    if manifest.description:
        blocks.append(manifest.description)

    functions = list(functions)
    if functions:
        blocks.append("## API")
        for function in functions:
            blocks.extend(_function_blocks(function))

    if manifest.license:
        blocks.append("## License")
        blocks.append(manifest.license)

    return "\n\n".join(blocks) + "\n"


# ################
# Implementation
# ################


def _function_blocks(function: Function) -> list[str]:
    """Return the markdown blocks documenting one function."""
    blocks = [f"### `{format_function(function)}`"]
    if function.args:
        rows = ["| Argument | Type |", "|---|---|"]
        for arg in function.args:
            rows.append(f"| `{arg.name}` | `{_escape_cell(format_type(arg.type))}` |")
        blocks.append("\n".join(rows))
    else:
        blocks.append("_No arguments._")
    blocks.append(f"**Returns:** `{format_type(function.return_type)}`")
    return blocks


def _escape_cell(text: str) -> str:
    """Escape pipe characters so a custom type name cannot break the table."""
    return text.replace("|", "\\|")
