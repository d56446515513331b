from __future__ import annotations

import logging
from pathlib import Path

from lispy import LispValue
from lispy.builtin.env_builtin import register, load_file
from lispy.evaluation.evaluator import evaluate_toplevel
from lispy.reader.parser import parse
from lispy.reader.reader import read_program
from lispy.types.environment import Environment
from lispy.types.errors import ErrorKind, LispySyntaxError
from lispy.types.lisp_error import LispError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns the root Environment and feeds source units through
    parse -> read -> evaluate. Builtins are installed exactly once, when
    the interpreter is constructed.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)

        if prelude:
            self.eval(prelude, "<prelude>")

    def eval(self, code: str, filename: str = "<stdin>") -> LispValue:
        """Evaluate one unit of source text as a single S-Expression.

        A syntax error comes back as an error value rather than raising.
        """
        try:
            program = read_program(parse(code, filename), filename)
        except LispySyntaxError as e:
            logger.debug("Parse failure in %s: %s", filename, e)
            return LispError(str(e), ErrorKind.PARSE)
        return evaluate_toplevel(program, self.env)

    def load(self, path: str | Path) -> LispValue:
        """Load a source file, exactly as the `load` builtin does."""
        return load_file(self.env, str(path))
