# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

from declgen.derives import DeriveSet
from declgen.formatting import Indent, Visibility, join_bounded
from declgen.generics import DeclHead, HeadLike, coerce_head
from declgen.impls import Impl
from declgen.naming import PascalCase
from declgen.traits import TraitImplementation
from declgen.type_expr import TypeExpr


@dataclass(frozen=True)
class EnumOption:
	"""A variant: `Name,` or `Name(T0, T1),` (payload types are opaque text)."""

	name: PascalCase
	option_types: Tuple[str, ...] = ()

	@classmethod
	def new(cls, name: str, option_types: Sequence[str] = ()) -> "EnumOption":
		return cls(PascalCase(name), tuple(option_types))

	def __str__(self) -> str:
		if not self.option_types:
			return f"{self.name},\n"
		return f"{self.name}({join_bounded(self.option_types)}),\n"


@dataclass(frozen=True)
class Enum:
	head: DeclHead
	visibility: Visibility = Visibility.PUB
	derives: DeriveSet = field(default_factory=DeriveSet, compare=False)
	options: Tuple[EnumOption, ...] = ()

	def __post_init__(self) -> None:
		object.__setattr__(self, "derives", self.derives.copy())

	@classmethod
	def new(cls, head: HeadLike) -> "Enum":
		return cls(coerce_head(head))

	@property
	def typ(self) -> TypeExpr:
		return self.head.typ

	def with_derives(self, derives: DeriveSet) -> "Enum":
		return replace(self, derives=derives)

	def with_visibility(self, visibility: Visibility) -> "Enum":
		return replace(self, visibility=visibility)

	def add_option(self, option: EnumOption) -> "Enum":
		return replace(self, options=self.options + (option,))

	def __str__(self) -> str:
		out = f"{self.derives}{self.visibility}enum {self.head} {{"
		if not self.options:
			return out + "}\n"
		return out + "\n" + "".join(f"{Indent(1)}{opt}" for opt in self.options) + "}\n"


@dataclass(frozen=True)
class EnumType:
	"""An enum together with its inherent impl and trait impls, blank-line separated."""

	base: Enum
	enum_impl: Optional[Impl] = None
	enum_traits: Tuple[TraitImplementation, ...] = ()

	def with_impl(self, enum_impl: Impl) -> "EnumType":
		return replace(self, enum_impl=enum_impl)

	def add_trait(self, trait_impl: TraitImplementation) -> "EnumType":
		return replace(self, enum_traits=self.enum_traits + (trait_impl,))

	def __str__(self) -> str:
		out = f"{self.base}\n"
		if self.enum_impl is not None:
			out += f"{self.enum_impl}\n"
		for trait_impl in self.enum_traits:
			out += f"{trait_impl.render()}\n"
		return out


__all__ = ["EnumOption", "Enum", "EnumType"]
