# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error tiers for declaration modeling.

Two tiers exist:

- `DeclError` (a `ValueError`) is raised for bad *input*: identifier text that
  violates its naming convention, malformed type expressions, unknown derive
  names, malformed generic parameter lists. Callers are expected to handle or
  propagate it. Every instance carries a stable `code`, the offending `text`
  and a human-readable `reason`.
- `FatalDeclarationError` (an `AssertionError`) is raised when the caller has
  assembled an inconsistent declaration, e.g. a trait implementation that does
  not conform to its trait. This is a bug in the generator, not a data error,
  and is not meant to be caught.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from .diagnostics import Diagnostic


class DeclError(ValueError):
	"""Recoverable parse/validation error for declaration input."""

	def __init__(self, code: str, text: str, reason: str) -> None:
		super().__init__(f"{reason}: {text!r}")
		self.code = code
		self.text = text
		self.reason = reason

	def format_human(self) -> str:
		return f"[{self.code}] {self}"


class IdentifierErrorKind(Enum):
	EMPTY_INPUT = "E-IDENT-EMPTY"
	CONTAINS_SPACE = "E-IDENT-SPACE"
	CONTAINS_UNDERSCORE = "E-IDENT-UNDERSCORE"
	STARTS_LOWERCASE = "E-IDENT-STARTS-LOWERCASE"
	CONTAINS_UPPERCASE = "E-IDENT-UPPERCASE"
	CONTAINS_LOWERCASE = "E-IDENT-LOWERCASE"
	CONTAINS_DOUBLE_SEPARATOR = "E-IDENT-DOUBLE-SEPARATOR"


class IdentifierError(DeclError):
	"""Identifier text violates the requested case convention."""

	def __init__(self, kind: IdentifierErrorKind, text: str, reason: str) -> None:
		super().__init__(kind.value, text, reason)
		self.kind = kind


class TypeExprErrorKind(Enum):
	EMPTY_NAME = "E-TYPE-EMPTY-NAME"
	CONTAINS_SPACE = "E-TYPE-SPACE"
	RESERVED_CHARACTER = "E-TYPE-RESERVED-CHAR"
	MALFORMED_BRACKETS = "E-TYPE-MALFORMED-BRACKETS"
	EMPTY_ARGUMENT_LIST = "E-TYPE-EMPTY-ARGS"
	UNPARSABLE_ARGUMENT = "E-TYPE-UNPARSABLE-ARG"
	MALFORMED_LIFETIME = "E-TYPE-MALFORMED-LIFETIME"


class TypeExprError(DeclError):
	"""
	Type expression text could not be parsed.

	For `UNPARSABLE_ARGUMENT` the `text` is the offending argument segment and
	the failure of the nested parse is chained as `__cause__`.
	"""

	def __init__(self, kind: TypeExprErrorKind, text: str, reason: str) -> None:
		super().__init__(kind.value, text, reason)
		self.kind = kind


class DeriveError(DeclError):
	"""
	Derive name is unusable: neither a built-in derive nor a valid custom
	derive (`E-DERIVE-UNKNOWN`), or a custom derive that shadows a built-in
	(`E-DERIVE-SHADOWS-BUILTIN`).
	"""

	def __init__(self, text: str, reason: str, code: str = "E-DERIVE-UNKNOWN") -> None:
		super().__init__(code, text, reason)


class GenericParamsError(DeclError):
	"""Generic parameter list (`<T, 'a>`) is malformed."""


class FatalDeclarationError(AssertionError):
	"""
	Programming error in the caller: an inconsistent declaration was built.

	Deliberately an `AssertionError` and not a `DeclError`, so a generic
	`except ValueError` around input handling never hides it.
	"""


class ConformanceViolation(FatalDeclarationError):
	"""A trait implementation does not match the trait it implements."""

	def __init__(self, trait_name: str, target: str, diagnostics: Sequence[Diagnostic]) -> None:
		self.trait_name = trait_name
		self.target = target
		self.diagnostics: List[Diagnostic] = list(diagnostics)
		lines = [f"impl {trait_name} for {target} does not conform to its trait"]
		lines.extend(f"  {d.format_human()}" for d in self.diagnostics)
		super().__init__("\n".join(lines))

	def codes(self) -> List[Optional[str]]:
		return [d.code for d in self.diagnostics]


__all__ = [
	"DeclError",
	"IdentifierErrorKind",
	"IdentifierError",
	"TypeExprErrorKind",
	"TypeExprError",
	"DeriveError",
	"GenericParamsError",
	"FatalDeclarationError",
	"ConformanceViolation",
]
