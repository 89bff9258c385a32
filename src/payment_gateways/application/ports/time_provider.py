from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for time operations.

    Contract:
    - now() returns the current LOCAL wall-clock time
    - Only used to stamp log lines; no timezone or ordering guarantees
      beyond what the clock itself provides
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local datetime."""
        ...
