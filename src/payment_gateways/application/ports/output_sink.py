from __future__ import annotations

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Port for console-style output.

    Every user-visible line (validation traces, invalid-card notices,
    processing traces, log lines) goes through a sink so callers can
    observe it without capturing process-wide stdout.
    """

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write text followed by a line break."""
