# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed model for parsed declaration files (types, arguments, functions)."""

from exspork.model.entities import Argument, DeclarationFile, Function
from exspork.model.types import CustomType, KeywordType, Type, TypeKeyword

__all__ = [
    # Type system
    "TypeKeyword",
    "KeywordType",
    "CustomType",
    "Type",
    # Entities
    "Argument",
    "Function",
    "DeclarationFile",
]
