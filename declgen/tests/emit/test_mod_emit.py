# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from declgen.enums import Enum, EnumOption
from declgen.formatting import Visibility
from declgen.mods import Mod
from declgen.structs import Field, Struct


def test_mod_wraps_and_indents_body() -> None:
	inner = Struct.new("Test").add_field(Field.new("value", "u32"))
	m = Mod.new("test_mod", str(inner))
	assert str(m) == "pub mod test_mod {\n    pub struct Test {\n        pub value: u32,\n    }\n}\n"


def test_mod_add_item_and_blank_lines() -> None:
	m = (
		Mod.new("shapes", "")
		.with_visibility(Visibility.PRIVATE)
		.add_item(Struct.new("Unit"))
		.add_item("\n")
		.add_item(Enum.new("Kind").add_option(EnumOption.new("A")))
	)
	assert str(m) == (
		"mod shapes {\n"
		"    pub struct Unit;\n"
		"\n"
		"    pub enum Kind {\n"
		"        A,\n"
		"    }\n"
		"}\n"
	)


def test_nested_mods() -> None:
	inner = Mod.new("inner", "pub struct Leaf;\n")
	outer = Mod.new("outer", str(inner))
	assert str(outer) == "pub mod outer {\n    pub mod inner {\n        pub struct Leaf;\n    }\n}\n"
