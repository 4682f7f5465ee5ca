# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from declgen import __version__
from declgen.core.errors import DeclError
from declgen.derives import DeriveSet
from declgen.generics import GenericParams
from declgen.naming import CaseKind, convert, parse_identifier
from declgen.type_expr import Generic, Lifetime, TypeExpr, parse_type_expr

_KIND_CHOICES = [k.value for k in CaseKind]


def _generic_to_dict(generic: Generic) -> Dict[str, Any]:
	if isinstance(generic, Lifetime):
		return {"lifetime": generic.name}
	assert isinstance(generic, TypeExpr)
	return {"name": str(generic.name), "args": [_generic_to_dict(a) for a in generic.args]}


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="declgen", description="Inspect declgen identifiers, type expressions and derives")
	p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
	p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
	sub = p.add_subparsers(dest="cmd", required=True)

	typ = sub.add_parser("type", help="Parse a type expression and print its canonical form")
	typ.add_argument("expr", help="Type expression, e.g. 'Component<Self, Id<Body>>'")
	typ.add_argument("--json", action="store_true", help="Emit the parsed tree as JSON")

	case = sub.add_parser("case", help="Validate an identifier and convert it to another case")
	case.add_argument("text", help="Identifier text")
	case.add_argument("--from", dest="from_kind", choices=_KIND_CHOICES, required=True, help="Convention of TEXT")
	case.add_argument("--to", dest="to_kind", choices=_KIND_CHOICES, default=None, help="Target convention (default: validate only)")

	derive = sub.add_parser("derive", help="Print the closed #[derive(...)] line for the given derives")
	derive.add_argument("names", nargs="+", help="Derive names, e.g. Hash Ord Serialize")

	generics = sub.add_parser("generics", help="Parse a generic parameter list, e.g. \"<T, 'a>\"")
	generics.add_argument("params", help="Generic parameter list")

	return p


def _run(args: argparse.Namespace) -> str:
	if args.cmd == "type":
		parsed = parse_type_expr(args.expr)
		if args.json:
			return json.dumps(_generic_to_dict(parsed), indent=2, sort_keys=True)
		return str(parsed)
	if args.cmd == "case":
		ident = parse_identifier(CaseKind(args.from_kind), args.text)
		if args.to_kind is None:
			return str(ident)
		return str(convert(ident, CaseKind(args.to_kind)))
	if args.cmd == "derive":
		return str(DeriveSet(args.names)).rstrip("\n")
	if args.cmd == "generics":
		return str(GenericParams.parse(args.params))
	raise AssertionError(f"unhandled command {args.cmd!r}")


def main(argv: list[str] | None = None) -> int:
	parser = _build_parser()
	args = parser.parse_args(argv)
	if args.verbose:
		logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
	try:
		out = _run(args)
	except DeclError as exc:
		print(f"error: {exc.format_human()}", file=sys.stderr)
		return 1
	print(out)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
