"""Clock abstraction.

Expiry checks depend on "today". The domain asks a Clock instead of
reading the wall clock so tests (and replays) can pin the date.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):

    @abstractmethod
    def today(self) -> date:
        """Return the current calendar date."""
