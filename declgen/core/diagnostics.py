# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for validation passes.

Kept minimal: a message plus a stable code and optional notes. Declarations
have no source locations, so unlike a compiler diagnostic there is no span.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Diagnostic:
	"""Represents a single validation finding (error/warning)."""

	message: str
	code: Optional[str] = None
	severity: str = "error"
	notes: Tuple[str, ...] = ()

	def format_human(self) -> str:
		head = f"{self.severity}: {self.message}"
		if self.code:
			head = f"{self.severity}[{self.code}]: {self.message}"
		if not self.notes:
			return head
		return "\n".join([head] + [f"  note: {n}" for n in self.notes])


__all__ = ["Diagnostic"]
