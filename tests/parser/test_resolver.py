# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for type token resolution."""

import pytest

from exspork.model.types import CustomType, KeywordType, TypeKeyword
from exspork.parser.resolver import resolve_type

# ###############
# Keywords
# ###############


class TestKeywords:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("boolean", TypeKeyword.BOOLEAN),
            ("number", TypeKeyword.NUMBER),
            ("string", TypeKeyword.STRING),
            ("array", TypeKeyword.ARRAY),
            ("tuple", TypeKeyword.TUPLE),
            ("enum", TypeKeyword.ENUM),
            ("any", TypeKeyword.ANY),
            ("void", TypeKeyword.VOID),
            ("null", TypeKeyword.NULL),
            ("undefined", TypeKeyword.UNDEFINED),
            ("never", TypeKeyword.NEVER),
            ("object", TypeKeyword.OBJECT),
        ],
    )
    def test_keyword_resolves_to_keyword_type(self, token: str, expected: TypeKeyword) -> None:
        assert resolve_type(token) == KeywordType(keyword=expected)

    def test_every_keyword_is_covered(self) -> None:
        for keyword in TypeKeyword:
            assert resolve_type(keyword.value) == KeywordType(keyword=keyword)


# ###############
# Custom Types
# ###############


class TestCustomTypes:
    @pytest.mark.parametrize("token", ["Uint8Array", "Promise<any>", "number[]", "MyStruct", "bigint"])
    def test_unknown_token_is_custom_verbatim(self, token: str) -> None:
        assert resolve_type(token) == CustomType(name=token)

    def test_lookup_is_case_sensitive(self) -> None:
        assert resolve_type("Number") == CustomType(name="Number")
        assert resolve_type("VOID") == CustomType(name="VOID")

    def test_empty_token_is_custom(self) -> None:
        assert resolve_type("") == CustomType(name="")

    def test_token_is_not_trimmed(self) -> None:
        assert resolve_type(" number") == CustomType(name=" number")
        assert resolve_type("number\n") == CustomType(name="number\n")
