# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping from raw type tokens to resolved types."""

from exspork.model.types import CustomType, KeywordType, Type, TypeKeyword

# ###############
# Public Interface
# ###############


def resolve_type(token: str) -> Type:
    """Resolve a type token to a keyword type or a custom type.

    Lookup is exact and case-sensitive. Every token resolves: anything
    outside the keyword set, including the empty string, becomes a
    :class:`CustomType` carrying the token verbatim. The token is not trimmed.
    """
    keyword = _KEYWORDS.get(token)
    if keyword is not None:
        return KeywordType(keyword=keyword)
    return CustomType(name=token)


# ################
# Implementation
# ################

_KEYWORDS: dict[str, TypeKeyword] = {keyword.value: keyword for keyword in TypeKeyword}
