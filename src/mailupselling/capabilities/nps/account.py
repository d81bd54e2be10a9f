"""Account age computation."""

from __future__ import annotations

import time
from collections.abc import Callable

from mailupselling.capabilities.nps.models import AccountAge, PrimaryUser

SECONDS_PER_DAY = 86_400


class AccountAgeCalculator:
    """Whole days elapsed since the user signed up, never negative."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock

    def __call__(self, user: PrimaryUser) -> AccountAge:
        elapsed = int(self.clock()) - user.create_time
        return AccountAge(days=max(0, elapsed // SECONDS_PER_DAY))


__all__ = ["AccountAgeCalculator", "SECONDS_PER_DAY"]
