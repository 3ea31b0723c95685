# io_adapters/console_adapter.py

import sys
from typing import TextIO

from scanner.io_adapter import IOAdapter


class ConsoleAdapter(IOAdapter):
    """
    A command-line IO adapter for the validated reader:
      - prompt(text): prints the message followed by a newline
      - ask(question): prints the question (without newline) and flushes,
                       so it is visible before the blocking read
    """
    def __init__(self, out: TextIO | None = None):
        self._out = out

    @property
    def out(self) -> TextIO:
        # resolved lazily so redirected/captured stdout is honoured
        return self._out if self._out is not None else sys.stdout

    def prompt(self, text: str):
        print(text, file=self.out)

    def ask(self, question: str):
        print(question, end="", file=self.out, flush=True)
