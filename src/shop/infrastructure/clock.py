"""Wall-clock implementation of the domain Clock."""

from __future__ import annotations

from datetime import date

from shop.domain.clock import Clock


class SystemClock(Clock):

    def today(self) -> date:
        return date.today()
