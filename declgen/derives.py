# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Derive annotations (`#[derive(...)]`) and their implication closure.

Some derives only make sense together with others: `Ord` needs `PartialOrd`,
`Eq` needs `PartialEq`, `Hash` needs `Eq`, `Copy` needs `Clone`. `DeriveSet`
keeps itself closed under these implications at all times: `insert` is the
only way in, and it inserts the implied derive first through the same entry
point, so chains such as Hash -> Eq -> PartialEq resolve fully.

The implication table is acyclic, so the recursion is bounded by its depth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, Tuple, Union

from declgen.core.errors import DeriveError, IdentifierError
from declgen.formatting import join_bounded
from declgen.naming import PascalCase

log = logging.getLogger("declgen.derives")

E_DERIVE_SHADOWS_BUILTIN = "E-DERIVE-SHADOWS-BUILTIN"


class Derive(Enum):
	"""Built-in derivable capabilities, in canonical rendering order."""

	DEBUG = "Debug"
	DEFAULT = "Default"
	COPY = "Copy"
	CLONE = "Clone"
	EQ = "Eq"
	PARTIAL_EQ = "PartialEq"
	ORD = "Ord"
	PARTIAL_ORD = "PartialOrd"
	HASH = "Hash"

	def __str__(self) -> str:
		return self.value


@dataclass(frozen=True)
class CustomDerive:
	"""
	A user derive (`Serialize`, `Component`, ...); sorts after built-ins.

	Built-in names (`Hash`, `Debug`, ...) are rejected; those are `Derive` members.
	"""

	name: PascalCase

	def __post_init__(self) -> None:
		if not isinstance(self.name, PascalCase):
			object.__setattr__(self, "name", PascalCase(str(self.name)))
		if str(self.name) in _BY_NAME:
			raise DeriveError(str(self.name), "custom derive shadows a built-in derive", code=E_DERIVE_SHADOWS_BUILTIN)

	def __str__(self) -> str:
		return str(self.name)


DeriveLike = Union[Derive, CustomDerive]

# Immediate implications only; transitive ones come from recursive insert.
IMPLIES: Dict[Derive, Derive] = {
	Derive.ORD: Derive.PARTIAL_ORD,
	Derive.EQ: Derive.PARTIAL_EQ,
	Derive.HASH: Derive.EQ,
	Derive.COPY: Derive.CLONE,
}

_BUILTIN_ORDER: Dict[Derive, int] = {d: i for i, d in enumerate(Derive)}
_BY_NAME: Dict[str, Derive] = {d.value: d for d in Derive}


def _sort_key(derive: DeriveLike) -> Tuple[int, int, str]:
	if isinstance(derive, Derive):
		return (0, _BUILTIN_ORDER[derive], "")
	return (1, 0, str(derive.name))


def parse_derive(text: str) -> DeriveLike:
	"""Map a derive name to a built-in `Derive`, else a `CustomDerive`."""
	builtin = _BY_NAME.get(text)
	if builtin is not None:
		return builtin
	try:
		return CustomDerive(PascalCase(text))
	except IdentifierError as exc:
		raise DeriveError(text, f"unknown derive and not a valid custom derive name ({exc.reason})") from exc


def _coerce(derive: Union[DeriveLike, str]) -> DeriveLike:
	if isinstance(derive, (Derive, CustomDerive)):
		return derive
	if isinstance(derive, str):
		return parse_derive(derive)
	raise TypeError(f"not a derive: {derive!r}")


class DeriveSet:
	"""A derive set closed under `IMPLIES`; renders as one annotation line."""

	def __init__(self, derives: Iterable[Union[DeriveLike, str]] = ()) -> None:
		self._derives: set[DeriveLike] = set()
		for derive in derives:
			self.insert(derive)

	@classmethod
	def of(cls, *derives: Union[DeriveLike, str]) -> "DeriveSet":
		return cls(derives)

	@classmethod
	def debug(cls) -> "DeriveSet":
		return cls.of(Derive.DEBUG)

	@classmethod
	def debug_default(cls) -> "DeriveSet":
		return cls.of(Derive.DEBUG, Derive.DEFAULT)

	@classmethod
	def debug_default_clone(cls) -> "DeriveSet":
		return cls.of(Derive.DEBUG, Derive.DEFAULT, Derive.CLONE)

	def insert(self, derive: Union[DeriveLike, str]) -> None:
		derive = _coerce(derive)
		if derive in self._derives:
			return
		implied = IMPLIES.get(derive) if isinstance(derive, Derive) else None
		if implied is not None:
			log.debug("derive %s implies %s", derive, implied)
			self.insert(implied)
		self._derives.add(derive)

	def copy(self) -> "DeriveSet":
		return DeriveSet(self._derives)

	def union(self, other: Iterable[Union[DeriveLike, str]]) -> "DeriveSet":
		out = self.copy()
		for derive in other:
			out.insert(derive)
		return out

	def as_frozenset(self) -> FrozenSet[DeriveLike]:
		return frozenset(self._derives)

	def sorted(self) -> Tuple[DeriveLike, ...]:
		return tuple(sorted(self._derives, key=_sort_key))

	def __contains__(self, derive: object) -> bool:
		if isinstance(derive, str):
			try:
				derive = parse_derive(derive)
			except DeriveError:
				return False
		return derive in self._derives

	def __iter__(self) -> Iterator[DeriveLike]:
		return iter(self.sorted())

	def __len__(self) -> int:
		return len(self._derives)

	def __bool__(self) -> bool:
		return bool(self._derives)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, DeriveSet):
			return NotImplemented
		return self._derives == other._derives

	__hash__ = None  # type: ignore[assignment]

	def __repr__(self) -> str:
		return f"DeriveSet({', '.join(str(d) for d in self.sorted())})"

	def __str__(self) -> str:
		if not self._derives:
			return ""
		return join_bounded((str(d) for d in self.sorted()), left="#[derive(", right=")]") + "\n"


__all__ = [
	"Derive",
	"CustomDerive",
	"DeriveLike",
	"DeriveSet",
	"IMPLIES",
	"E_DERIVE_SHADOWS_BUILTIN",
	"parse_derive",
]
