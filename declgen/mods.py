# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass, replace

from declgen.formatting import Visibility, indent_lines
from declgen.naming import SnakeCase


@dataclass(frozen=True)
class Mod:
	"""`pub mod name { ... }` around already-rendered declarations."""

	name: SnakeCase
	body: str = ""
	visibility: Visibility = Visibility.PUB

	@classmethod
	def new(cls, name: str, body: str) -> "Mod":
		return cls(SnakeCase(name), body)

	def with_visibility(self, visibility: Visibility) -> "Mod":
		return replace(self, visibility=visibility)

	def add_item(self, item: object) -> "Mod":
		"""Append a rendered declaration (anything whose `str()` is source)."""
		return replace(self, body=self.body + str(item))

	def __str__(self) -> str:
		return f"{self.visibility}mod {self.name} {{\n{indent_lines(self.body)}}}\n"


__all__ = ["Mod"]
