# Core type aliases for Lispy's data model.
# Numbers and strings are plain Python `int` and `str`; every other kind of
# value (symbols, errors, functions, S- and Q-expressions) is a small class
# under lispy.types.
#
# Naming guidance:
# - LispValue: any runtime value, whether read from source or produced by
#   the evaluator. Code and data share one representation.

from typing import Any, Callable

LispValue = Any

# Native primitive signature: (environment, owned argument list) -> value
BuiltinFn = Callable[..., LispValue]

__version__ = "0.1.0"
