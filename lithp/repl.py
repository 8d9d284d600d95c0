"""
Interactive read-eval-print loop for lithp.

One line is read, parsed, reduced and printed before the next one is read.
Line editing and history come from readline; the history file is loaded on
entry and written back on every exit path.
"""

from __future__ import annotations

import logging
import readline
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TextIO

from lithp import __version__
from lithp import config
from lithp.errors import LithpSyntaxError
from lithp.interpreter import Interpreter

logger = logging.getLogger(__name__)

BANNER = f"Lithp Version {__version__}\nPress Ctrl+c or Ctrl+d to Exit\n"


@contextmanager
def history(path: Path | None, length: int) -> Iterator[None]:
    """Load readline history from ``path`` and always save it back."""
    if path is None:
        yield
        return
    try:
        readline.read_history_file(str(path))
    except FileNotFoundError:
        logger.debug("no history file at %s", path)
    except OSError as ex:
        logger.warning("could not load history from %s: %s", path, ex)
    readline.set_history_length(length)
    try:
        yield
    finally:
        try:
            readline.write_history_file(str(path))
        except OSError as ex:
            logger.warning("could not save history to %s: %s", path, ex)


class Repl:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        prompt: str | None = None,
        history_path: Path | None = None,
        history_length: int | None = None,
        input_fn: Callable[[str], str] = input,
        out: TextIO | None = None,
    ):
        self.interpreter = interpreter or Interpreter()
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.history_path = history_path
        self.history_length = history_length or config.get_history_length()
        self.input_fn = input_fn
        self.out = out or sys.stdout

    def handle_line(self, line: str) -> str:
        """Evaluate one line, returning the printed value or the parse diagnostic."""
        try:
            return self.interpreter.eval_to_string(line)
        except LithpSyntaxError as ex:
            return str(ex)

    def run(self) -> int:
        self.out.write(BANNER)
        evaluated = 0
        with history(self.history_path, self.history_length):
            while True:
                try:
                    line = self.input_fn(self.prompt)
                except EOFError:
                    self.out.write("\n")
                    break
                except KeyboardInterrupt:
                    self.out.write("\n")
                    break
                if not line.strip():
                    continue
                readline.add_history(line)
                self.out.write(self.handle_line(line) + "\n")
                evaluated += 1
        return evaluated
