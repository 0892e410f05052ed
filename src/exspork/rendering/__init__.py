# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Display strings and markdown generation for parsed declarations."""

from exspork.rendering.display import format_argument, format_function, format_type
from exspork.rendering.markdown import generate_markdown

__all__ = [
    "format_argument",
    "format_function",
    "format_type",
    "generate_markdown",
]
