# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Human-readable display strings for parsed declarations.

The output is meant for diagnostics and generated documentation. It is not
TypeScript and is never parsed back.
"""

from exspork.model.entities import Argument, Function
from exspork.model.types import CustomType, KeywordType, Type

# ###############
# Public Interface
# ###############


def format_type(type_: Type) -> str:
    """Return the keyword (e.g. ``number``) or the verbatim custom type name."""
    if isinstance(type_, KeywordType):
        return type_.keyword.value
    if isinstance(type_, CustomType):
        return type_.name
    raise TypeError(f"Unsupported type reference: {type_!r}")


def format_argument(argument: Argument) -> str:
    """Return ``name: type``."""
    return f"{argument.name}: {format_type(argument.type)}"


def format_function(function: Function) -> str:
    """Return ``name(arg: type, ...) -> return_type``."""
    args = ", ".join(format_argument(arg) for arg in function.args)
    return f"{function.name}({args}) -> {format_type(function.return_type)}"
