from __future__ import annotations

from abc import ABC, abstractmethod


class IdProvider(ABC):
    """Port for random identifiers.

    Contract:
    - new_id() returns a fresh identifier string of at least 8 characters
    - Uniqueness is the implementation's concern; callers that truncate
      the result accept that collisions become possible
    """

    @abstractmethod
    def new_id(self) -> str:
        """Return a new identifier string."""
        ...
