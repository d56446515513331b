"""Command-line front end.

    python -m lispy              interactive read-eval-print loop
    python -m lispy a.lspy ...   load each file in turn
"""

from __future__ import annotations

import logging
import sys

from lispy import __version__
from lispy.config import get_log_level, get_prompt
from lispy.interpreter import Interpreter
from lispy.printer import lisp_println
from lispy.types.lisp_error import LispError


def repl(interp: Interpreter) -> None:
    print(f"Lispy Version {__version__}")
    print("Press Ctrl+c to Exit\n")
    prompt = get_prompt()
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        lisp_println(interp.eval(line))


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    if not argv:
        repl(interp)
        return 0

    status = 0
    for filename in argv:
        result = interp.load(filename)
        if isinstance(result, LispError):
            lisp_println(result)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
