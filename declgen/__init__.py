# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
declgen: model typed declarations as values and render them as source text.

Core:
  naming     case-convention identifiers and conversions
  type_expr  type expression parser / renderer
  derives    derive sets closed under implication
  traits     traits, trait impls, conformance checking

Emitters:
  structs, enums, impls, mods, generics, formatting
"""

from declgen.core.diagnostics import Diagnostic
from declgen.core.errors import (
	ConformanceViolation,
	DeclError,
	DeriveError,
	FatalDeclarationError,
	GenericParamsError,
	IdentifierError,
	IdentifierErrorKind,
	TypeExprError,
	TypeExprErrorKind,
)
from declgen.derives import CustomDerive, Derive, DeriveSet, parse_derive
from declgen.enums import Enum, EnumOption, EnumType
from declgen.formatting import Indent, Visibility
from declgen.generics import DeclHead, GenericParams
from declgen.impls import CodeLine, Function, Impl
from declgen.mods import Mod
from declgen.naming import CaseKind, PascalCase, ShoutingSnakeCase, SnakeCase, convert, parse_identifier
from declgen.structs import AnonField, Field, Struct
from declgen.traits import Trait, TraitFunction, TraitImplementation, check_conformance
from declgen.type_expr import Lifetime, TypeExpr, TypeName, parse_generic, parse_type_expr

__version__ = "0.3.0"

__all__ = [
	"Diagnostic",
	"ConformanceViolation",
	"DeclError",
	"DeriveError",
	"FatalDeclarationError",
	"GenericParamsError",
	"IdentifierError",
	"IdentifierErrorKind",
	"TypeExprError",
	"TypeExprErrorKind",
	"CustomDerive",
	"Derive",
	"DeriveSet",
	"parse_derive",
	"Enum",
	"EnumOption",
	"EnumType",
	"Indent",
	"Visibility",
	"DeclHead",
	"GenericParams",
	"CodeLine",
	"Function",
	"Impl",
	"Mod",
	"CaseKind",
	"PascalCase",
	"ShoutingSnakeCase",
	"SnakeCase",
	"convert",
	"parse_identifier",
	"AnonField",
	"Field",
	"Struct",
	"Trait",
	"TraitFunction",
	"TraitImplementation",
	"check_conformance",
	"Lifetime",
	"TypeExpr",
	"TypeName",
	"parse_generic",
	"parse_type_expr",
]
