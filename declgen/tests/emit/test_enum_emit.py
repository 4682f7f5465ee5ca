# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from declgen.core.errors import ConformanceViolation
from declgen.derives import Derive, DeriveSet
from declgen.enums import Enum, EnumOption, EnumType
from declgen.impls import CodeLine, Function, Impl
from declgen.traits import Trait, TraitFunction


def test_empty_enum() -> None:
	assert str(Enum.new("Empty")) == "pub enum Empty {}\n"


def test_single_option_enum() -> None:
	e = Enum.new("Single").with_derives(DeriveSet.debug()).add_option(EnumOption.new("A", ["u32", "char"]))
	assert str(e) == "#[derive(Debug)]\npub enum Single {\n    A(u32, char),\n}\n"


def test_unit_options() -> None:
	e = Enum.new("Dir").add_option(EnumOption.new("Up")).add_option(EnumOption.new("Down"))
	assert str(e) == "pub enum Dir {\n    Up,\n    Down,\n}\n"


def _default_trait() -> Trait:
	return Trait.new("Default").add_function_definition(TraitFunction.new("default").with_return("Self"))


def test_enum_type_with_trait_impl() -> None:
	base = Enum.new("Test").with_derives(DeriveSet.debug()).add_option(EnumOption.new("Number", ["u32"]))
	default_impl = (
		_default_trait()
		.impl_for(base)
		.add_function(TraitFunction.new("default").with_return("Self").add_line(CodeLine.new(0, "Test::Number(0)")))
	)
	out = str(EnumType(base).add_trait(default_impl))
	assert out == (
		"#[derive(Debug)]\n"
		"pub enum Test {\n"
		"    Number(u32),\n"
		"}\n"
		"\n"
		"impl Default for Test {\n"
		"    fn default() -> Self {\n"
		"        Test::Number(0)\n"
		"    }\n"
		"}\n"
		"\n"
	)


def test_enum_type_with_inherent_impl() -> None:
	base = Enum.new("Flag").add_option(EnumOption.new("On"))
	impl = Impl.new(base).add_function(Function.new("is_on").with_parameters("&self").with_return("bool").add_line(CodeLine.new(0, "true")))
	out = str(EnumType(base).with_impl(impl))
	assert out == (
		"pub enum Flag {\n"
		"    On,\n"
		"}\n"
		"\n"
		"impl Flag {\n"
		"    pub fn is_on(&self) -> bool {\n"
		"        true\n"
		"    }\n"
		"}\n"
		"\n"
	)


def test_enum_type_rejects_nonconforming_trait() -> None:
	base = Enum.new("Test").add_option(EnumOption.new("A"))
	with pytest.raises(ConformanceViolation):
		str(EnumType(base).add_trait(_default_trait().impl_for(base)))


def test_enum_builder_copies_do_not_share_derives() -> None:
	derives = DeriveSet.debug()
	first = Enum.new("Dir").with_derives(derives)
	second = first.add_option(EnumOption.new("Up"))
	second.derives.insert(Derive.COPY)
	derives.insert(Derive.HASH)
	assert str(first) == "#[derive(Debug)]\npub enum Dir {}\n"
	assert str(second) == "#[derive(Debug, Copy, Clone)]\npub enum Dir {\n    Up,\n}\n"
