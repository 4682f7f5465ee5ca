# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Text helpers shared by the declaration emitters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

INDENT_WIDTH = 4


@dataclass(frozen=True)
class Indent:
	"""`level` steps of `INDENT_WIDTH` spaces."""

	level: int = 1

	def __add__(self, other: int) -> "Indent":
		return Indent(self.level + other)

	def __str__(self) -> str:
		return " " * (INDENT_WIDTH * self.level)


def join_bounded(
	items: Iterable[object],
	*,
	left: str = "",
	right: str = "",
	join: str = ", ",
	prepend: str = "",
	append: str = "",
) -> str:
	"""
	Render `left + join.join(prepend + item + append) + right`.

	Bounds are written even for an empty iterable; callers that want nothing
	for an empty list check before calling.
	"""
	return left + join.join(f"{prepend}{item}{append}" for item in items) + right


def indent_lines(text: str, level: int = 1) -> str:
	"""Prefix every non-blank line of `text` with `Indent(level)`; each line ends in a newline."""
	pad = str(Indent(level))
	return "".join(f"{pad}{line}\n" if line else "\n" for line in text.splitlines())


class Visibility(Enum):
	PUB = "pub"
	PUB_CRATE = "pub (crate)"
	PRIVATE = "private"

	def __str__(self) -> str:
		# Rendered as a prefix, including its trailing space.
		if self is Visibility.PRIVATE:
			return ""
		return f"{self.value} "


__all__ = ["INDENT_WIDTH", "Indent", "join_bounded", "indent_lines", "Visibility"]
