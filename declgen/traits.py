# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Traits and trait implementations, with structural conformance checking.

A `Trait` declares associated type names and function signatures; a function
signature with body lines is a default implementation. A
`TraitImplementation` binds the associated types for a target type and
provides function bodies.

Conformance rules
-----------------
An implementation conforms to its trait when all of these hold:

1. every associated type the trait declares is bound;
2. every bound associated type is declared by the trait;
3. every provided function matches a trait function by name, parameter text
   and return type (bodies are not compared);
4. every trait function that has a return type and no default body is
   provided.

Trait functions with a default body, or with neither a return type nor a
body, may be omitted.

`check_conformance` reports violations as diagnostics. Rendering an
implementation always re-runs the check and raises `ConformanceViolation` (a
`FatalDeclarationError`) on any violation: a non-conforming implementation is
a bug in the generator that built it, so there is no recoverable path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

from declgen.core.diagnostics import Diagnostic
from declgen.core.errors import ConformanceViolation, FatalDeclarationError
from declgen.formatting import Indent, Visibility
from declgen.generics import GenericParams
from declgen.impls import CodeLine, TargetLike, render_body, render_functions, resolve_target
from declgen.naming import PascalCase, SnakeCase
from declgen.type_expr import TypeExpr, TypeName, coerce_type_expr

log = logging.getLogger("declgen.traits")

E_MISSING_ASSOC_TYPE = "E-IMPL-MISSING-ASSOC-TYPE"
E_SUPERFLUOUS_ASSOC_TYPE = "E-IMPL-SUPERFLUOUS-ASSOC-TYPE"
E_SUPERFLUOUS_FN = "E-IMPL-SUPERFLUOUS-FN"
E_MISSING_REQUIRED_FN = "E-IMPL-MISSING-REQUIRED-FN"

SignatureKey = Tuple[SnakeCase, str, Optional[str]]


@dataclass(frozen=True)
class TraitFunction:
	"""
	A function signature inside a trait or trait implementation.

	In a trait, `lines` is the default body (empty = declaration only). In an
	implementation, `lines` is the provided body.
	"""

	name: SnakeCase
	parameters: str = ""
	return_type: Optional[str] = None
	lines: Tuple[CodeLine, ...] = ()

	@classmethod
	def new(cls, name: str) -> "TraitFunction":
		return cls(SnakeCase(name))

	def with_parameters(self, params: str) -> "TraitFunction":
		return replace(self, parameters=params)

	def with_return(self, return_type: str) -> "TraitFunction":
		return replace(self, return_type=return_type)

	def add_line(self, line: CodeLine) -> "TraitFunction":
		return replace(self, lines=self.lines + (line,))

	@property
	def signature(self) -> SignatureKey:
		return (self.name, self.parameters, self.return_type)

	@property
	def has_default_body(self) -> bool:
		return bool(self.lines)

	@property
	def is_required(self) -> bool:
		return self.return_type is not None and not self.lines

	def matches(self, other: "TraitFunction") -> bool:
		return self.signature == other.signature

	def signature_text(self) -> str:
		ret = f" -> {self.return_type}" if self.return_type is not None else ""
		return f"fn {self.name}({self.parameters}){ret}"

	def __str__(self) -> str:
		head = f"{Indent(1)}{self.signature_text()}"
		if not self.lines:
			return head + ";\n"
		return head + " {\n" + render_body(self.lines)


@dataclass(frozen=True)
class Trait:
	name: PascalCase
	visibility: Visibility = Visibility.PUB
	associated_types: Tuple[TypeName, ...] = ()
	functions: Tuple[TraitFunction, ...] = ()

	@classmethod
	def new(cls, name: str) -> "Trait":
		return cls(PascalCase(name))

	def with_visibility(self, visibility: Visibility) -> "Trait":
		return replace(self, visibility=visibility)

	def add_associated_type(self, name: Union[str, TypeName]) -> "Trait":
		type_name = name if isinstance(name, TypeName) else TypeName(name)
		return replace(self, associated_types=self.associated_types + (type_name,))

	def add_function_definition(self, function_def: TraitFunction) -> "Trait":
		return replace(self, functions=self.functions + (function_def,))

	def impl_for(self, target: TargetLike) -> "TraitImplementation":
		typ, generics = resolve_target(target)
		return TraitImplementation(trait_def=self, typ=typ, generics=generics)

	def __str__(self) -> str:
		out = f"{self.visibility}trait {self.name} {{"
		if not self.associated_types and not self.functions:
			return out + "}\n"
		out += "\n"
		for ty in self.associated_types:
			out += f"{Indent(1)}type {ty};\n"
		for func in self.functions:
			out += str(func)
		return out + "}\n"


@dataclass(frozen=True)
class TraitImplementation:
	"""`impl Trait for Type { ... }`; rendering validates conformance first."""

	trait_def: Trait
	typ: TypeExpr
	generics: GenericParams = GenericParams()
	# Ordered (name, bound type) pairs; a repeated name is rejected on construction.
	associated_types: Tuple[Tuple[TypeName, TypeExpr], ...] = ()
	functions: Tuple[TraitFunction, ...] = ()

	def __post_init__(self) -> None:
		seen: List[TypeName] = []
		for name, _ in self.associated_types:
			if name in seen:
				raise FatalDeclarationError(
					f"impl {self.trait_def.name} for {self.typ} binds associated type '{name}' more than once"
				)
			seen.append(name)

	def add_associated_type(
		self,
		associated_type_name: Union[str, TypeName],
		associated_type: Union[str, TypeExpr],
	) -> "TraitImplementation":
		"""Bind an associated type; re-binding a name replaces the earlier binding in place."""
		key = associated_type_name if isinstance(associated_type_name, TypeName) else TypeName(associated_type_name)
		value = coerce_type_expr(associated_type)
		bindings = list(self.associated_types)
		for i, (name, _) in enumerate(bindings):
			if name == key:
				bindings[i] = (key, value)
				break
		else:
			bindings.append((key, value))
		return replace(self, associated_types=tuple(bindings))

	def add_function(self, function_def: TraitFunction) -> "TraitImplementation":
		return replace(self, functions=self.functions + (function_def,))

	def binding(self, name: Union[str, TypeName]) -> Optional[TypeExpr]:
		key = name if isinstance(name, TypeName) else TypeName(name)
		for bound_name, bound in self.associated_types:
			if bound_name == key:
				return bound
		return None

	def check(self) -> List[Diagnostic]:
		return check_conformance(self)

	def validate(self) -> None:
		"""Raise `ConformanceViolation` unless this implementation conforms."""
		diags = check_conformance(self)
		if diags:
			log.debug("impl %s for %s rejected: %s", self.trait_def.name, self.typ, [d.code for d in diags])
			raise ConformanceViolation(str(self.trait_def.name), str(self.typ), diags)

	def render(self) -> str:
		self.validate()
		out = f"impl{self.generics} {self.trait_def.name} for {self.typ} {{"
		if self.associated_types or self.functions:
			out += "\n"
		for name, bound in self.associated_types:
			out += f"{Indent(1)}type {name} = {bound};\n"
		return out + render_functions(self.functions) + "}\n"

	def __str__(self) -> str:
		return self.render()


def check_conformance(impl: TraitImplementation) -> List[Diagnostic]:
	"""Return one diagnostic per violated rule instance; empty when conforming."""
	trait = impl.trait_def
	diags: List[Diagnostic] = []
	bound_names = [name for name, _ in impl.associated_types]

	for required in trait.associated_types:
		if required not in bound_names:
			diags.append(
				Diagnostic(
					message=f"missing associated type '{required}' required by trait '{trait.name}'",
					code=E_MISSING_ASSOC_TYPE,
				)
			)

	for name in bound_names:
		if name not in trait.associated_types:
			diags.append(
				Diagnostic(
					message=f"associated type '{name}' is not declared by trait '{trait.name}'",
					code=E_SUPERFLUOUS_ASSOC_TYPE,
				)
			)

	for provided in impl.functions:
		if not any(provided.matches(f) for f in trait.functions):
			notes: Tuple[str, ...] = ()
			same_name = [f for f in trait.functions if f.name == provided.name]
			if same_name:
				notes = tuple(f"trait declares: {f.signature_text()}" for f in same_name)
			diags.append(
				Diagnostic(
					message=f"function '{provided.signature_text()}' is not declared by trait '{trait.name}'",
					code=E_SUPERFLUOUS_FN,
					notes=notes,
				)
			)

	for declared in trait.functions:
		if not declared.is_required:
			continue
		if not any(declared.matches(f) for f in impl.functions):
			diags.append(
				Diagnostic(
					message=f"missing implementation of '{declared.signature_text()}' required by trait '{trait.name}'",
					code=E_MISSING_REQUIRED_FN,
				)
			)

	return diags


__all__ = [
	"TraitFunction",
	"Trait",
	"TraitImplementation",
	"check_conformance",
	"E_MISSING_ASSOC_TYPE",
	"E_SUPERFLUOUS_ASSOC_TYPE",
	"E_SUPERFLUOUS_FN",
	"E_MISSING_REQUIRED_FN",
]
