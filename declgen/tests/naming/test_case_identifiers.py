# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from declgen.core.errors import DeclError, IdentifierError, IdentifierErrorKind
from declgen.naming import CaseKind, PascalCase, ShoutingSnakeCase, SnakeCase, parse_identifier


def _kind_of(cls, text: str) -> IdentifierErrorKind:
	with pytest.raises(IdentifierError) as excinfo:
		cls.parse(text)
	return excinfo.value.kind


def test_pascal_rejects_empty() -> None:
	assert _kind_of(PascalCase, "") is IdentifierErrorKind.EMPTY_INPUT


def test_pascal_rejects_spaces() -> None:
	assert _kind_of(PascalCase, "Nope Wont") is IdentifierErrorKind.CONTAINS_SPACE


def test_pascal_rejects_underscores() -> None:
	assert _kind_of(PascalCase, "Nope_Wont") is IdentifierErrorKind.CONTAINS_UNDERSCORE


def test_pascal_rejects_lowercase_start() -> None:
	assert _kind_of(PascalCase, "nope") is IdentifierErrorKind.STARTS_LOWERCASE


def test_pascal_accepts_valid_input() -> None:
	ident = PascalCase.parse("ValidInput")
	assert str(ident) == "ValidInput"
	assert ident.kind is CaseKind.PASCAL


def test_snake_rejects_empty() -> None:
	assert _kind_of(SnakeCase, "") is IdentifierErrorKind.EMPTY_INPUT


def test_snake_rejects_uppercase() -> None:
	assert _kind_of(SnakeCase, "upperCase") is IdentifierErrorKind.CONTAINS_UPPERCASE


def test_snake_rejects_spaces() -> None:
	assert _kind_of(SnakeCase, "invalid case") is IdentifierErrorKind.CONTAINS_SPACE


def test_snake_rejects_double_underscore() -> None:
	assert _kind_of(SnakeCase, "invalid__case") is IdentifierErrorKind.CONTAINS_DOUBLE_SEPARATOR


def test_snake_accepts_valid_input() -> None:
	assert str(SnakeCase.parse("valid_input")) == "valid_input"


def test_shouting_rejects_lowercase() -> None:
	assert _kind_of(ShoutingSnakeCase, "NOPE_wont") is IdentifierErrorKind.CONTAINS_LOWERCASE


def test_shouting_rejects_spaces() -> None:
	assert _kind_of(ShoutingSnakeCase, "NOPE WONT") is IdentifierErrorKind.CONTAINS_SPACE


def test_shouting_rejects_double_underscore() -> None:
	assert _kind_of(ShoutingSnakeCase, "NOPE__WONT") is IdentifierErrorKind.CONTAINS_DOUBLE_SEPARATOR


def test_shouting_rejects_empty_like_its_siblings() -> None:
	assert _kind_of(ShoutingSnakeCase, "") is IdentifierErrorKind.EMPTY_INPUT


def test_shouting_accepts_valid_input() -> None:
	assert str(ShoutingSnakeCase.parse("VALID_INPUT")) == "VALID_INPUT"


def test_direct_construction_validates_too() -> None:
	with pytest.raises(IdentifierError):
		SnakeCase("Bad")


def test_identifier_error_is_recoverable_and_carries_input() -> None:
	with pytest.raises(DeclError) as excinfo:
		parse_identifier(CaseKind.SNAKE, "two  words")
	err = excinfo.value
	assert isinstance(err, ValueError)
	assert err.text == "two  words"
	assert err.code == IdentifierErrorKind.CONTAINS_SPACE.value
	assert "spaces" in err.reason


def test_parse_identifier_dispatches_on_kind() -> None:
	assert isinstance(parse_identifier(CaseKind.PASCAL, "Body"), PascalCase)
	assert isinstance(parse_identifier(CaseKind.SNAKE, "body"), SnakeCase)
	assert isinstance(parse_identifier(CaseKind.SHOUTING_SNAKE, "BODY"), ShoutingSnakeCase)


def test_identifiers_of_different_kinds_are_distinct() -> None:
	assert SnakeCase("abc") == SnakeCase("abc")
	assert SnakeCase("abc") != ShoutingSnakeCase("ABC")
	assert len({SnakeCase("a"), SnakeCase("a"), SnakeCase("b")}) == 2
