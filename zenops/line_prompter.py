"""Show a prompt and read one line, from a terminal or from any stream.

:class:`ConsolePrompter` is used interactively and offers line editing
where the platform provides it; :class:`StreamPrompter` reads from and
writes to arbitrary text streams, which suits tests and non-TTY use.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TextIO


class OutcomeKind(Enum):
    """What kind of result a prompt produced."""

    LINE = "line"
    EOF = "eof"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class LineOutcome:
    """Result of :meth:`LinePrompter.read_line`.

    ``LINE`` carries the text without its trailing newline; ``EOF`` lets the
    caller fall back to a default; ``INTERRUPTED`` means the caller must abort.
    """

    kind: OutcomeKind
    text: Optional[str] = None

    @classmethod
    def line(cls, text: str) -> "LineOutcome":
        return cls(OutcomeKind.LINE, text)

    @classmethod
    def eof(cls) -> "LineOutcome":
        return cls(OutcomeKind.EOF)

    @classmethod
    def interrupted(cls) -> "LineOutcome":
        return cls(OutcomeKind.INTERRUPTED)


class LinePrompter(ABC):
    """Show a prompt, read one line, and print status lines."""

    @abstractmethod
    def read_line(self, prompt: str) -> LineOutcome:
        """Display ``prompt`` and read one line."""

    @abstractmethod
    def writeln(self, msg: str) -> None:
        """Emit a status or re-prompt line."""


class StreamPrompter(LinePrompter):
    """Write prompts to ``writer`` and read lines from ``reader``."""

    def __init__(self, reader: TextIO, writer: TextIO) -> None:
        self.reader = reader
        self.writer = writer

    def read_line(self, prompt: str) -> LineOutcome:
        self.writer.write(prompt)
        self.writer.flush()
        raw = self.reader.readline()
        if raw == "":
            return LineOutcome.eof()
        if raw.endswith("\n"):
            raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
        return LineOutcome.line(raw)

    def writeln(self, msg: str) -> None:
        self.writer.write(f"{msg}\n")
        self.writer.flush()


class ConsolePrompter(LinePrompter):
    """Interactive prompter on the controlling terminal.

    Ctrl-D maps to ``EOF`` and Ctrl-C to ``INTERRUPTED``.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ) -> None:
        if input_func is input:
            try:
                import readline  # noqa: F401  (enables line editing for input())
            except ImportError:
                pass
        self._input = input_func
        self._output = output

    def read_line(self, prompt: str) -> LineOutcome:
        try:
            return LineOutcome.line(self._input(prompt))
        except EOFError:
            return LineOutcome.eof()
        except KeyboardInterrupt:
            return LineOutcome.interrupted()

    def writeln(self, msg: str) -> None:
        out = self._output if self._output is not None else sys.stdout
        out.write(f"{msg}\n")
        out.flush()