# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type representations for parsed TypeScript declarations."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class TypeKeyword(Enum):
    """Built-in TypeScript type keywords recognised by the resolver."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    TUPLE = "tuple"
    ENUM = "enum"
    ANY = "any"
    VOID = "void"
    NULL = "null"
    UNDEFINED = "undefined"
    NEVER = "never"
    OBJECT = "object"


class KeywordType(BaseModel):
    """Reference to a built-in keyword type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["keyword"] = "keyword"
    keyword: TypeKeyword


class CustomType(BaseModel):
    """Reference to any type name outside the keyword set, kept verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    name: str


# A resolved type: either a built-in keyword or an opaque custom name.
# The `kind` discriminator keeps JSON deserialization unambiguous.
Type = Annotated[KeywordType | CustomType, _Field(discriminator="kind")]
