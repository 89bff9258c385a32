from __future__ import annotations

import sys

from payment_gateways.application.ports import OutputSink


class ConsoleOutputSink(OutputSink):
    """Sink writing to the process's standard output.

    sys.stdout is looked up on every write, so redirecting it after the
    sink is created (pytest's capsys, contextlib.redirect_stdout) works.
    """

    def write_line(self, text: str) -> None:
        print(text, file=sys.stdout)


class MemoryOutputSink(OutputSink):
    """Sink that records lines in memory for assertions.

    Implementation notes:
    - lines returns a copy; mutating it does not affect the sink
    - NOT thread-safe; one sink per test
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def write_line(self, text: str) -> None:
        self._lines.append(text)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()
