# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type expressions: a type name plus an ordered list of generic arguments.

Shapes
------
- `TypeName`  opaque, non-empty, whitespace-free name (`u32`, `Self`, `Vec`).
- `Lifetime`  a `'a` marker that may appear as a generic argument.
- `TypeExpr`  `name` + `args`, where each argument is a `Generic`
              (`TypeExpr | Lifetime`).

Parsing is a small recursive descent over the text:

	Type     := Identifier ( '<' ArgList '>' )?
	ArgList  := Generic ( ',' Generic )*
	Generic  := Type | Lifetime
	Lifetime := '\\'' Identifier

Arguments are split on *top-level* commas only, so `Component<Self, Id<Body>>`
yields two arguments. Rendering is the exact inverse of parsing:
`str(parse_type_expr(str(t))) == str(t)`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from declgen.core.errors import TypeExprError, TypeExprErrorKind

LIFETIME_MARK = "'"

_OPENERS = {"<": ">", "(": ")", "[": "]"}
_CLOSERS = {v: k for k, v in _OPENERS.items()}


def _bracket_failure(text: str) -> Optional[Tuple[TypeExprErrorKind, str]]:
	"""Reject unbalanced `()`/`[]` and commas outside them."""
	stack: List[str] = []
	for c in text:
		if c in _OPENERS:
			stack.append(c)
		elif c in _CLOSERS:
			if not stack or stack[-1] != _CLOSERS[c]:
				return TypeExprErrorKind.MALFORMED_BRACKETS, f"unbalanced '{c}'"
			stack.pop()
		elif c == "," and not stack:
			return TypeExprErrorKind.RESERVED_CHARACTER, "top-level ',' is reserved for separating generic arguments"
	if stack:
		return TypeExprErrorKind.MALFORMED_BRACKETS, f"unclosed '{stack[-1]}'"
	return None


def _type_name_failure(text: str) -> Optional[Tuple[TypeExprErrorKind, str]]:
	if not text:
		return TypeExprErrorKind.EMPTY_NAME, "type name cannot be empty"
	if any(c.isspace() for c in text):
		return TypeExprErrorKind.CONTAINS_SPACE, "type name cannot contain spaces"
	if "<" in text or ">" in text:
		return TypeExprErrorKind.RESERVED_CHARACTER, "type name cannot contain angle brackets"
	if text.startswith(LIFETIME_MARK):
		return TypeExprErrorKind.RESERVED_CHARACTER, "type name cannot start with a lifetime mark"
	failure = _bracket_failure(text)
	if failure is not None:
		kind, reason = failure
		return kind, f"type name: {reason}"
	return None


@dataclass(frozen=True, order=True)
class TypeName:
	"""Opaque type identifier; validated on construction."""

	value: str

	def __post_init__(self) -> None:
		failure = _type_name_failure(self.value)
		if failure is not None:
			kind, reason = failure
			raise TypeExprError(kind, self.value, reason)

	@classmethod
	def parse(cls, text: str) -> "TypeName":
		return cls(text)

	def __str__(self) -> str:
		return self.value


@dataclass(frozen=True)
class Lifetime:
	"""A lifetime marker (`'a`). `name` is stored without the leading mark."""

	name: str

	def __post_init__(self) -> None:
		if not self.name or any(c.isspace() for c in self.name):
			raise TypeExprError(
				TypeExprErrorKind.MALFORMED_LIFETIME,
				LIFETIME_MARK + self.name,
				"lifetime name must be non-empty and contain no spaces",
			)
		if any(c in self.name for c in "<>,'()[]"):
			raise TypeExprError(
				TypeExprErrorKind.MALFORMED_LIFETIME,
				LIFETIME_MARK + self.name,
				"lifetime name contains a reserved character",
			)

	@classmethod
	def parse(cls, text: str) -> "Lifetime":
		if not text.startswith(LIFETIME_MARK):
			raise TypeExprError(TypeExprErrorKind.MALFORMED_LIFETIME, text, "lifetime must start with '")
		return cls(text[len(LIFETIME_MARK):])

	def __str__(self) -> str:
		return f"{LIFETIME_MARK}{self.name}"


@dataclass(frozen=True)
class TypeExpr:
	"""
	A parsed type expression tree.

	Examples:
	- `u32`                        -> TypeExpr(TypeName("u32"))
	- `Test<ID, T>`                -> TypeExpr(TypeName("Test"), (ID, T))
	- `Component<Self, Id<Body>>`  -> TypeExpr(Component, (Self, Id<Body>))
	- `Ref<'a, T>`                 -> TypeExpr(Ref, (Lifetime("a"), T))
	"""

	name: TypeName
	args: Tuple["Generic", ...] = ()

	def __post_init__(self) -> None:
		if not isinstance(self.name, TypeName):
			object.__setattr__(self, "name", TypeName(str(self.name)))
		if not isinstance(self.args, tuple):
			object.__setattr__(self, "args", tuple(self.args))

	@classmethod
	def parse(cls, text: str) -> "TypeExpr":
		return parse_type_expr(text)

	@staticmethod
	def named(name: str, args: Sequence["Generic"] | None = None) -> "TypeExpr":
		"""Construct a type node from a raw name and already-built arguments."""
		return TypeExpr(name=TypeName(name), args=tuple(args or ()))

	@property
	def is_generic(self) -> bool:
		return bool(self.args)

	def __str__(self) -> str:
		if not self.args:
			return str(self.name)
		return f"{self.name}<{', '.join(render_generic(a) for a in self.args)}>"


Generic = Union[TypeExpr, Lifetime]


def render_generic(generic: Generic) -> str:
	if isinstance(generic, TypeExpr):
		return str(generic)
	if isinstance(generic, Lifetime):
		return str(generic)
	raise TypeError(f"not a generic argument: {generic!r}")


def _split_top_level(body: str, whole: str) -> List[str]:
	"""
	Split `body` on commas that are not nested inside `<>`, `()` or `[]`.

	Raises MALFORMED_BRACKETS (reported against `whole`) if the brackets in
	`body` do not balance.
	"""
	parts: List[str] = []
	stack: List[str] = []
	start = 0
	for i, c in enumerate(body):
		if c in _OPENERS:
			stack.append(c)
		elif c in _CLOSERS:
			if not stack or stack[-1] != _CLOSERS[c]:
				raise TypeExprError(TypeExprErrorKind.MALFORMED_BRACKETS, whole, f"unbalanced '{c}' in generic arguments")
			stack.pop()
		elif c == "," and not stack:
			parts.append(body[start:i].strip())
			start = i + 1
	if stack:
		raise TypeExprError(TypeExprErrorKind.MALFORMED_BRACKETS, whole, f"unclosed '{stack[-1]}' in generic arguments")
	parts.append(body[start:].strip())
	return parts


def parse_type_expr(text: str) -> TypeExpr:
	"""
	Parse `text` as a `Type`.

	Raises `TypeExprError`:
	- MALFORMED_BRACKETS    no closing `>`, a stray `>`, or unbalanced nesting,
	- EMPTY_ARGUMENT_LIST   `Name<>` / `Name< >`,
	- UNPARSABLE_ARGUMENT   first argument whose own parse failed (chained),
	- EMPTY_NAME / CONTAINS_SPACE / RESERVED_CHARACTER for a bad name.
	"""
	idx = text.find("<")
	if idx < 0:
		if ">" in text:
			raise TypeExprError(TypeExprErrorKind.MALFORMED_BRACKETS, text, "'>' without matching '<'")
		return TypeExpr(TypeName(text))

	name_text, suffix = text[:idx], text[idx:]
	if not suffix.endswith(">") or len(suffix) < 2:
		raise TypeExprError(TypeExprErrorKind.MALFORMED_BRACKETS, text, "generic arguments must be wrapped in '<' and '>'")
	body = suffix[1:-1]
	segments = _split_top_level(body, text)
	if len(segments) == 1 and not segments[0]:
		raise TypeExprError(TypeExprErrorKind.EMPTY_ARGUMENT_LIST, text, "generic argument list cannot be empty")

	name = TypeName(name_text)
	args: List[Generic] = []
	for segment in segments:
		try:
			args.append(parse_generic(segment))
		except TypeExprError as exc:
			raise TypeExprError(
				TypeExprErrorKind.UNPARSABLE_ARGUMENT,
				segment,
				f"cannot parse generic argument of {name} ({exc.reason})",
			) from exc
	return TypeExpr(name=name, args=tuple(args))


def parse_generic(text: str) -> Generic:
	"""
	Parse a single generic argument: a `Type`, or failing that a `Lifetime`.

	When both fail, the lifetime failure is reported for text that starts with
	the lifetime mark and the type failure otherwise.
	"""
	try:
		return parse_type_expr(text)
	except TypeExprError as type_err:
		try:
			return Lifetime.parse(text)
		except TypeExprError as lifetime_err:
			if text.startswith(LIFETIME_MARK):
				raise lifetime_err from None
			raise type_err from None


def coerce_type_expr(value: Union[str, TypeExpr]) -> TypeExpr:
	"""Accept either a parsed `TypeExpr` or type text."""
	if isinstance(value, TypeExpr):
		return value
	return parse_type_expr(value)


__all__ = [
	"TypeName",
	"Lifetime",
	"TypeExpr",
	"Generic",
	"render_generic",
	"parse_type_expr",
	"parse_generic",
	"coerce_type_expr",
]
