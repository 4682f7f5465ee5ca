# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Inherent impl blocks, functions and body lines.

	impl Test {
	    pub fn test_fn() -> u32 {
	        panic!()
	    }
	}

All values are frozen; `with_*` / `add_*` return updated copies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from declgen.formatting import Indent, Visibility, join_bounded
from declgen.generics import DeclHead, GenericParams
from declgen.naming import SnakeCase
from declgen.type_expr import TypeExpr, parse_type_expr


@dataclass(frozen=True)
class CodeLine:
	"""One body line; `indent` is absolute within the enclosing function."""

	indent: Indent
	text: str

	@classmethod
	def new(cls, indent: int, text: str) -> "CodeLine":
		"""`indent` is relative to the function body (0 = first body level)."""
		return cls(Indent(indent + 1), text)

	def __str__(self) -> str:
		return f"{self.indent}{self.text}"


def render_body(lines: Tuple[CodeLine, ...]) -> str:
	body = "".join(f"{Indent(1)}{line}\n" for line in lines)
	return f"{body}{Indent(1)}}}\n"


@dataclass(frozen=True)
class Function:
	"""A function inside an inherent impl block (has a visibility and a body)."""

	name: SnakeCase
	visibility: Visibility = Visibility.PUB
	parameters: str = ""
	return_type: Optional[str] = None
	lines: Tuple[CodeLine, ...] = ()

	@classmethod
	def new(cls, name: str) -> "Function":
		return cls(SnakeCase(name))

	def with_parameters(self, params: str) -> "Function":
		return replace(self, parameters=params)

	def with_return(self, return_type: str) -> "Function":
		return replace(self, return_type=return_type)

	def with_visibility(self, visibility: Visibility) -> "Function":
		return replace(self, visibility=visibility)

	def add_line(self, line: CodeLine) -> "Function":
		return replace(self, lines=self.lines + (line,))

	def __str__(self) -> str:
		ret = f"-> {self.return_type} " if self.return_type is not None else ""
		head = f"{Indent(1)}{self.visibility}fn {self.name}({self.parameters}) {ret}{{"
		if not self.lines:
			return head + "}\n"
		return head + "\n" + render_body(self.lines)


TargetLike = Union[str, TypeExpr, DeclHead]


def resolve_target(target: TargetLike) -> Tuple[TypeExpr, GenericParams]:
	"""
	Resolve what an impl block is for.

	Accepts type text, a `TypeExpr`, a `DeclHead`, or any declaration with a
	`head` (struct, enum). Declaration heads also contribute their generic
	parameters, which the impl block re-declares (`impl<T> Wrapper<T>`).
	"""
	head = getattr(target, "head", target)
	if isinstance(head, DeclHead):
		return head.typ, head.generics
	if isinstance(target, TypeExpr):
		return target, GenericParams()
	if isinstance(target, str):
		return parse_type_expr(target), GenericParams()
	raise TypeError(f"cannot implement for {target!r}")


def render_functions(functions: Tuple[object, ...]) -> str:
	return join_bounded((str(f) for f in functions), join="\n")


@dataclass(frozen=True)
class Impl:
	"""Inherent impl block: `impl Type { ... }`."""

	typ: TypeExpr
	generics: GenericParams = GenericParams()
	functions: Tuple[Function, ...] = ()

	@classmethod
	def new(cls, target: TargetLike) -> "Impl":
		typ, generics = resolve_target(target)
		return cls(typ=typ, generics=generics)

	def add_function(self, function: Function) -> "Impl":
		return replace(self, functions=self.functions + (function,))

	def __str__(self) -> str:
		out = f"impl{self.generics} {self.typ} {{"
		if self.functions:
			out += "\n"
		return out + render_functions(self.functions) + "}\n"


__all__ = ["CodeLine", "Function", "Impl", "TargetLike", "resolve_target", "render_body", "render_functions"]
