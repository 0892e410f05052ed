# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration entities produced by the parser."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from exspork.model.types import Type

# ###############
# Public Interface
# ###############


class Argument(BaseModel):
    """A named, typed parameter of an exported function."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: Type


class Function(BaseModel):
    """An exported function signature.

    Arguments keep their declaration order. Functions sharing a name are
    independent records; nothing is merged.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    args: tuple[Argument, ...] = ()
    return_type: Type


class DeclarationFile(BaseModel):
    """Top-level model holding the functions of one declaration file in source order."""

    model_config = ConfigDict(frozen=True)

    functions: tuple[Function, ...] = ()


# Resolve forward references for models that use Type.
Argument.model_rebuild()
Function.model_rebuild()
DeclarationFile.model_rebuild()
