# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Struct declarations in their three shapes:

	pub struct Unit;
	pub struct Pair(pub u32, u8);
	pub struct Named {
	    pub field: u32,
	}
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple, Union

from declgen.derives import DeriveSet
from declgen.formatting import Indent, Visibility, join_bounded
from declgen.generics import DeclHead, HeadLike, coerce_head
from declgen.naming import SnakeCase
from declgen.type_expr import TypeExpr


@dataclass(frozen=True)
class Field:
	"""Named field: `pub name: Type,`. The type is opaque text."""

	name: SnakeCase
	field_type: str
	visibility: Visibility = Visibility.PUB

	@classmethod
	def new(cls, name: str, field_type: str) -> "Field":
		return cls(SnakeCase(name), field_type)

	def with_visibility(self, visibility: Visibility) -> "Field":
		return replace(self, visibility=visibility)

	def __str__(self) -> str:
		return f"{self.visibility}{self.name}: {self.field_type},"


@dataclass(frozen=True)
class AnonField:
	"""Positional (tuple struct) field: `pub Type`."""

	field_type: str
	visibility: Visibility = Visibility.PUB

	def with_visibility(self, visibility: Visibility) -> "AnonField":
		return replace(self, visibility=visibility)

	def __str__(self) -> str:
		return f"{self.visibility}{self.field_type}"


@dataclass(frozen=True)
class UnitFields:
	pass


@dataclass(frozen=True)
class TupleFields:
	fields: Tuple[AnonField, ...] = ()


@dataclass(frozen=True)
class NamedFields:
	fields: Tuple[Field, ...] = ()


Fields = Union[UnitFields, TupleFields, NamedFields]


@dataclass(frozen=True)
class Struct:
	head: DeclHead
	visibility: Visibility = Visibility.PUB
	derives: DeriveSet = field(default_factory=DeriveSet, compare=False)
	fields: Fields = UnitFields()

	def __post_init__(self) -> None:
		# Each instance owns its derive set; builders and with_derives never share one.
		object.__setattr__(self, "derives", self.derives.copy())

	@classmethod
	def new(cls, head: HeadLike) -> "Struct":
		return cls(coerce_head(head))

	@property
	def name(self) -> str:
		return str(self.head.name)

	@property
	def typ(self) -> TypeExpr:
		return self.head.typ

	def with_visibility(self, visibility: Visibility) -> "Struct":
		return replace(self, visibility=visibility)

	def with_derives(self, derives: DeriveSet) -> "Struct":
		return replace(self, derives=derives)

	def add_field(self, new_field: Field) -> "Struct":
		"""Append a named field; a unit struct becomes a named-field struct."""
		if isinstance(self.fields, TupleFields):
			raise TypeError(f"struct {self.head} has positional fields; use add_anon_field")
		existing = self.fields.fields if isinstance(self.fields, NamedFields) else ()
		return replace(self, fields=NamedFields(existing + (new_field,)))

	def add_anon_field(self, new_field: AnonField) -> "Struct":
		"""Append a positional field; a unit struct becomes a tuple struct."""
		if isinstance(self.fields, NamedFields):
			raise TypeError(f"struct {self.head} has named fields; use add_field")
		existing = self.fields.fields if isinstance(self.fields, TupleFields) else ()
		return replace(self, fields=TupleFields(existing + (new_field,)))

	def __str__(self) -> str:
		out = f"{self.derives}{self.visibility}struct {self.head}"
		if isinstance(self.fields, TupleFields):
			return out + join_bounded(self.fields.fields, left="(", right=");\n")
		if isinstance(self.fields, NamedFields):
			body = "".join(f"{Indent(1)}{f}\n" for f in self.fields.fields)
			return out + " {\n" + body + "}\n"
		return out + ";\n"


__all__ = ["Field", "AnonField", "UnitFields", "TupleFields", "NamedFields", "Fields", "Struct"]
