# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from declgen.core.errors import DeriveError
from declgen.derives import E_DERIVE_SHADOWS_BUILTIN, IMPLIES, CustomDerive, Derive, DeriveSet, parse_derive
from declgen.naming import PascalCase


def test_hash_implies_eq_and_partial_eq() -> None:
	ds = DeriveSet.of(Derive.HASH)
	assert ds.as_frozenset() == {Derive.HASH, Derive.EQ, Derive.PARTIAL_EQ}


def test_ord_implies_partial_ord() -> None:
	assert DeriveSet.of(Derive.ORD).as_frozenset() == {Derive.ORD, Derive.PARTIAL_ORD}


def test_copy_implies_clone() -> None:
	assert DeriveSet.of("Copy").as_frozenset() == {Derive.COPY, Derive.CLONE}


def test_set_is_closed_after_every_insert() -> None:
	ds = DeriveSet()
	for derive in Derive:
		ds.insert(derive)
		for have in ds:
			implied = IMPLIES.get(have) if isinstance(have, Derive) else None
			assert implied is None or implied in ds


def test_insert_is_idempotent() -> None:
	ds = DeriveSet.of(Derive.HASH)
	ds.insert(Derive.HASH)
	ds.insert(Derive.EQ)
	assert len(ds) == 3


def test_empty_set_renders_nothing() -> None:
	ds = DeriveSet()
	assert str(ds) == ""
	assert not ds


def test_presets_render_in_canonical_order() -> None:
	assert str(DeriveSet.debug()) == "#[derive(Debug)]\n"
	assert str(DeriveSet.debug_default()) == "#[derive(Debug, Default)]\n"
	assert str(DeriveSet.debug_default_clone()) == "#[derive(Debug, Default, Clone)]\n"


def test_rendering_order_is_independent_of_insertion_order() -> None:
	a = DeriveSet.of("Hash", "Debug")
	b = DeriveSet.of("Debug", "PartialEq", "Eq", "Hash")
	assert a == b
	assert str(a) == "#[derive(Debug, Eq, PartialEq, Hash)]\n"


def test_custom_derives_follow_builtins() -> None:
	ds = DeriveSet.of("Serialize", "Clone", "Component")
	assert str(ds) == "#[derive(Clone, Component, Serialize)]\n"
	assert CustomDerive(PascalCase("Serialize")) in ds


def test_membership_by_name() -> None:
	ds = DeriveSet.of(Derive.HASH)
	assert "Eq" in ds
	assert "Ord" not in ds
	assert "not a derive" not in ds


def test_parse_derive() -> None:
	assert parse_derive("PartialOrd") is Derive.PARTIAL_ORD
	assert parse_derive("Serialize") == CustomDerive(PascalCase("Serialize"))


def test_unknown_lowercase_derive_is_rejected() -> None:
	with pytest.raises(DeriveError) as excinfo:
		DeriveSet.of("serialize")
	assert excinfo.value.code == "E-DERIVE-UNKNOWN"
	assert isinstance(excinfo.value, ValueError)


def test_union_keeps_closure_and_leaves_operands_alone() -> None:
	base = DeriveSet.debug()
	merged = base.union(["Ord"])
	assert merged.as_frozenset() == {Derive.DEBUG, Derive.ORD, Derive.PARTIAL_ORD}
	assert base.as_frozenset() == {Derive.DEBUG}


@pytest.mark.parametrize("name", ["Hash", "Debug", "PartialEq"])
def test_custom_derive_cannot_shadow_builtin(name: str) -> None:
	with pytest.raises(DeriveError) as excinfo:
		CustomDerive(PascalCase(name))
	assert excinfo.value.code == E_DERIVE_SHADOWS_BUILTIN


def test_builtin_name_as_text_still_resolves_to_builtin() -> None:
	ds = DeriveSet.of("Hash", "Debug", Derive.DEBUG)
	assert ds.as_frozenset() == {Derive.DEBUG, Derive.HASH, Derive.EQ, Derive.PARTIAL_EQ}
	assert str(ds) == "#[derive(Debug, Eq, PartialEq, Hash)]\n"
