"""
declgen.core: shared error types and diagnostics used across the package.

Modules:
  - errors: recoverable parse errors and the fatal declaration tier
  - diagnostics: minimal Diagnostic record used by the conformance checker
"""

__all__ = [
	"errors",
	"diagnostics",
]
