# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner, type resolver, and parser for TypeScript declaration files."""

from exspork.parser.parser import (
    MalformedDeclarationError,
    ParseError,
    TrailingContentError,
    UnterminatedArgumentListError,
    UnterminatedSignatureError,
    parse,
    parse_argument,
    parse_argument_list,
    parse_declarations,
    parse_function,
)
from exspork.parser.resolver import resolve_type

__all__ = [
    "parse",
    "parse_argument",
    "parse_argument_list",
    "parse_declarations",
    "parse_function",
    "resolve_type",
    "ParseError",
    "MalformedDeclarationError",
    "TrailingContentError",
    "UnterminatedArgumentListError",
    "UnterminatedSignatureError",
]
