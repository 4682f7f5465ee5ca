# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Case-convention identifiers.

Three mutually exclusive conventions are modeled as separate value types:

- `PascalCase`         `BodyOrbit`   (no spaces/underscores, starts uppercase)
- `SnakeCase`          `body_orbit`  (all lowercase, no `__`)
- `ShoutingSnakeCase`  `BODY_ORBIT`  (all uppercase, no `__`)

Instances validate in `__post_init__`, so an identifier that violates its
convention can never exist; `parse` is the public spelling of construction.
Conversions between conventions are total. If one ever yields text that is
invalid for its target, that is a bug and surfaces as
`FatalDeclarationError` rather than `IdentifierError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from declgen.core.errors import FatalDeclarationError, IdentifierError, IdentifierErrorKind

log = logging.getLogger("declgen.naming")

SEPARATOR = "_"


class CaseKind(Enum):
	PASCAL = "pascal"
	SNAKE = "snake"
	SHOUTING_SNAKE = "shouting"


def _has_space(text: str) -> bool:
	return any(c.isspace() for c in text)


def _check_pascal(text: str) -> Optional[Tuple[IdentifierErrorKind, str]]:
	if not text:
		return IdentifierErrorKind.EMPTY_INPUT, "PascalCase cannot be empty"
	if _has_space(text):
		return IdentifierErrorKind.CONTAINS_SPACE, "PascalCase cannot contain spaces"
	if SEPARATOR in text:
		return IdentifierErrorKind.CONTAINS_UNDERSCORE, "PascalCase cannot contain underscores"
	if text[0].islower():
		return IdentifierErrorKind.STARTS_LOWERCASE, "PascalCase cannot start with lower case"
	return None


def _check_snake(text: str) -> Optional[Tuple[IdentifierErrorKind, str]]:
	if not text:
		return IdentifierErrorKind.EMPTY_INPUT, "snake_case cannot be empty"
	if any(c.isupper() for c in text):
		return IdentifierErrorKind.CONTAINS_UPPERCASE, "snake_case cannot contain upper case"
	if _has_space(text):
		return IdentifierErrorKind.CONTAINS_SPACE, "snake_case cannot contain spaces"
	if SEPARATOR * 2 in text:
		return IdentifierErrorKind.CONTAINS_DOUBLE_SEPARATOR, "snake_case cannot contain double underscores"
	return None


def _check_shouting_snake(text: str) -> Optional[Tuple[IdentifierErrorKind, str]]:
	if not text:
		return IdentifierErrorKind.EMPTY_INPUT, "SHOUTING_SNAKE_CASE cannot be empty"
	if any(c.islower() for c in text):
		return IdentifierErrorKind.CONTAINS_LOWERCASE, "SHOUTING_SNAKE_CASE cannot contain lower case"
	if _has_space(text):
		return IdentifierErrorKind.CONTAINS_SPACE, "SHOUTING_SNAKE_CASE cannot contain spaces"
	if SEPARATOR * 2 in text:
		return IdentifierErrorKind.CONTAINS_DOUBLE_SEPARATOR, "SHOUTING_SNAKE_CASE cannot contain double underscores"
	return None


@dataclass(frozen=True, order=True)
class _CaseIdentifier:
	value: str

	kind = None  # type: Optional[CaseKind]

	def __post_init__(self) -> None:
		if not isinstance(self.value, str):
			raise TypeError(f"{type(self).__name__} value must be str, got {type(self.value).__name__}")
		failure = _CHECKS[self.kind](self.value)
		if failure is not None:
			err_kind, reason = failure
			raise IdentifierError(err_kind, self.value, reason)

	@classmethod
	def parse(cls, text: str):
		return cls(text)

	def __str__(self) -> str:
		return self.value

	def __len__(self) -> int:
		return len(self.value)

	def to_pascal(self) -> "PascalCase":
		return convert(self, CaseKind.PASCAL)

	def to_snake(self) -> "SnakeCase":
		return convert(self, CaseKind.SNAKE)

	def to_shouting_snake(self) -> "ShoutingSnakeCase":
		return convert(self, CaseKind.SHOUTING_SNAKE)


class PascalCase(_CaseIdentifier):
	"""`BodyOrbit`: no spaces or underscores, first character not lower case."""

	kind = CaseKind.PASCAL


class SnakeCase(_CaseIdentifier):
	"""`body_orbit`: no upper case, no spaces, no double underscores."""

	kind = CaseKind.SNAKE


class ShoutingSnakeCase(_CaseIdentifier):
	"""`BODY_ORBIT`: no lower case, no spaces, no double underscores."""

	kind = CaseKind.SHOUTING_SNAKE


CaseIdentifier = Union[PascalCase, SnakeCase, ShoutingSnakeCase]

_CHECKS: Dict[Optional[CaseKind], Callable[[str], Optional[Tuple[IdentifierErrorKind, str]]]] = {
	CaseKind.PASCAL: _check_pascal,
	CaseKind.SNAKE: _check_snake,
	CaseKind.SHOUTING_SNAKE: _check_shouting_snake,
}

_CLASSES = {
	CaseKind.PASCAL: PascalCase,
	CaseKind.SNAKE: SnakeCase,
	CaseKind.SHOUTING_SNAKE: ShoutingSnakeCase,
}


def parse_identifier(kind: CaseKind, text: str) -> CaseIdentifier:
	"""Validate `text` against the convention `kind`; raise `IdentifierError` on failure."""
	return _CLASSES[kind](text)


def _pascal_to_snake_text(text: str) -> str:
	out: list[str] = []
	for i, c in enumerate(text):
		if c.isupper() and i != 0:
			out.append(SEPARATOR)
		out.append(c.lower())
	return "".join(out)


def _snake_to_pascal_text(text: str) -> str:
	return "".join(word[:1].upper() + word[1:] for word in text.split(SEPARATOR))


def _to_snake_text(ident: CaseIdentifier) -> str:
	if ident.kind is CaseKind.PASCAL:
		return _pascal_to_snake_text(ident.value)
	if ident.kind is CaseKind.SHOUTING_SNAKE:
		return ident.value.lower()
	return ident.value


def convert(ident: CaseIdentifier, kind: CaseKind) -> CaseIdentifier:
	"""
	Convert `ident` to the convention `kind`.

	Pascal and shouting-snake go through snake case as the intermediate form.
	The result is re-validated; invalid output means the input slipped past
	validation and is reported as a fatal error.
	"""
	if ident.kind is kind:
		return ident
	snake = _to_snake_text(ident)
	if kind is CaseKind.SNAKE:
		out = snake
	elif kind is CaseKind.SHOUTING_SNAKE:
		out = snake.upper()
	else:
		out = _snake_to_pascal_text(snake)
	try:
		converted = parse_identifier(kind, out)
	except IdentifierError as exc:
		raise FatalDeclarationError(
			f"case conversion bug: {ident.kind.value} {ident.value!r} -> {kind.value} produced {out!r} ({exc.reason})"
		) from exc
	log.debug("converted %s %r to %s %r", ident.kind.value, ident.value, kind.value, out)
	return converted


__all__ = [
	"CaseKind",
	"CaseIdentifier",
	"PascalCase",
	"SnakeCase",
	"ShoutingSnakeCase",
	"parse_identifier",
	"convert",
]
