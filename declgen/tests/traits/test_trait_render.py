# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from declgen.formatting import Visibility
from declgen.impls import CodeLine
from declgen.structs import Struct
from declgen.traits import Trait, TraitFunction


def test_trait_function_declaration() -> None:
	fn = TraitFunction.new("with_thing").with_parameters("mut self")
	assert str(fn) == "    fn with_thing(mut self);\n"


def test_trait_function_declaration_with_return() -> None:
	fn = TraitFunction.new("with_thing").with_parameters("mut self").with_return("Self")
	assert str(fn) == "    fn with_thing(mut self) -> Self;\n"
	assert fn.is_required


def test_trait_function_default_body() -> None:
	fn = TraitFunction.new("with_thing").with_parameters("mut self").add_line(CodeLine.new(0, "panic!()"))
	assert str(fn) == "    fn with_thing(mut self) {\n        panic!()\n    }\n"
	assert fn.has_default_body
	assert not fn.is_required


def test_empty_trait() -> None:
	assert str(Trait.new("Test")) == "pub trait Test {}\n"


def test_trait_visibility() -> None:
	assert str(Trait.new("Test").with_visibility(Visibility.PRIVATE)) == "trait Test {}\n"


def test_trait_with_associated_type() -> None:
	assert str(Trait.new("Test").add_associated_type("Idx")) == "pub trait Test {\n    type Idx;\n}\n"


def test_trait_with_function() -> None:
	trait = Trait.new("Test").add_function_definition(TraitFunction.new("method"))
	assert str(trait) == "pub trait Test {\n    fn method();\n}\n"


def test_empty_trait_impl() -> None:
	assert Trait.new("Trait").impl_for("Struct").render() == "impl Trait for Struct {}\n"


def test_trait_impl_with_associated_type() -> None:
	impl = Trait.new("Trait").add_associated_type("Idx").impl_for("Struct").add_associated_type("Idx", "u32")
	assert impl.render() == "impl Trait for Struct {\n    type Idx = u32;\n}\n"


def test_trait_impl_with_function() -> None:
	trait = Trait.new("Trait").add_function_definition(TraitFunction.new("method").with_return("u32"))
	impl = trait.impl_for("Struct").add_function(TraitFunction.new("method").with_return("u32").add_line(CodeLine.new(0, "1")))
	assert impl.render() == "impl Trait for Struct {\n    fn method() -> u32 {\n        1\n    }\n}\n"


def test_trait_impl_for_generic_struct_redeclares_parameters() -> None:
	wrapper = Struct.new("Wrapper<T>")
	impl = Trait.new("Marker").impl_for(wrapper)
	assert impl.render() == "impl<T> Marker for Wrapper<T> {}\n"
