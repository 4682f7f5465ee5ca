# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Generic parameter lists and declaration heads.

A declaration head is the `Name<T, 'a>` part of `pub struct Name<T, 'a> {`.
The name is a `PascalCase` identifier; the parameter list is parsed with the
lark grammar in `generics.lark` (one token per entry, so `<T U>` is rejected).

`DeclHead.typ` turns the head into the `TypeExpr` that names the declared
type, which is what impl blocks target.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from declgen.core.errors import GenericParamsError
from declgen.naming import PascalCase
from declgen.type_expr import Generic, Lifetime, TypeExpr, TypeName, render_generic

_GRAMMAR_PATH = Path(__file__).with_name("generics.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="generic_params",
	maybe_placeholders=False,
)


class _GenericParamsBuilder(Transformer):
	def param(self, children: List[Token]) -> Generic:
		tok = children[0]
		if tok.type == "LIFETIME":
			return Lifetime(tok.value[1:])
		return TypeExpr(TypeName(tok.value))

	def generic_params(self, children: List[Generic]) -> Tuple[Generic, ...]:
		return tuple(children)


def _param_key(param: Generic) -> str:
	return render_generic(param)


@dataclass(frozen=True)
class GenericParams:
	"""Ordered generic parameters; renders as `<T, 'a>` or `""` when empty."""

	params: Tuple[Generic, ...] = ()

	def __post_init__(self) -> None:
		if not isinstance(self.params, tuple):
			object.__setattr__(self, "params", tuple(self.params))
		seen: set[str] = set()
		for param in self.params:
			if isinstance(param, TypeExpr) and param.args:
				raise GenericParamsError(
					"E-GENERICS-NOT-A-PARAM",
					str(param),
					"generic parameter must be a bare name or lifetime",
				)
			key = _param_key(param)
			if key in seen:
				raise GenericParamsError("E-GENERICS-DUPLICATE", key, "duplicate generic parameter")
			seen.add(key)

	@classmethod
	def none(cls) -> "GenericParams":
		return cls()

	@classmethod
	def of(cls, *names: str) -> "GenericParams":
		"""Build from bare names; names starting with `'` become lifetimes."""
		params: List[Generic] = []
		for name in names:
			if name.startswith("'"):
				params.append(Lifetime.parse(name))
			else:
				params.append(TypeExpr(TypeName(name)))
		return cls(tuple(params))

	@classmethod
	def parse(cls, text: str) -> "GenericParams":
		"""Parse `<T, U, 'a>`; raise `GenericParamsError` on malformed input."""
		try:
			tree = _PARSER.parse(text)
		except UnexpectedInput as exc:
			raise GenericParamsError("E-GENERICS-SYNTAX", text, f"malformed generic parameter list ({type(exc).__name__})") from exc
		return cls(_GenericParamsBuilder().transform(tree))

	def __len__(self) -> int:
		return len(self.params)

	def __iter__(self):
		return iter(self.params)

	def __str__(self) -> str:
		if not self.params:
			return ""
		return "<" + ", ".join(render_generic(p) for p in self.params) + ">"


@dataclass(frozen=True)
class DeclHead:
	"""Name plus generic parameters of a struct/enum declaration."""

	name: PascalCase
	generics: GenericParams = GenericParams()

	@classmethod
	def parse(cls, text: str) -> "DeclHead":
		"""
		Parse `Name` or `Name<T, 'a>`.

		Raises `IdentifierError` for a bad name and `GenericParamsError` for a
		bad parameter list.
		"""
		idx = text.find("<")
		if idx < 0:
			return cls(PascalCase(text))
		return cls(PascalCase(text[:idx]), GenericParams.parse(text[idx:]))

	@property
	def typ(self) -> TypeExpr:
		return TypeExpr(TypeName(str(self.name)), self.generics.params)

	def __str__(self) -> str:
		return f"{self.name}{self.generics}"


HeadLike = Union[str, DeclHead]


def coerce_head(value: HeadLike) -> DeclHead:
	if isinstance(value, DeclHead):
		return value
	return DeclHead.parse(value)


__all__ = [
	"GenericParams",
	"DeclHead",
	"HeadLike",
	"coerce_head",
]
