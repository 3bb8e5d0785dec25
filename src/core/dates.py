"""
Synthetic order dates.

The order feed carries no timestamps, so each record gets a date drawn
once at normalization: a whole number of days back from "now", uniform
over the trailing window.
"""

import random
from datetime import datetime, timedelta, timezone

DEFAULT_WINDOW_DAYS = 30


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones pass through."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DateSynthesizer:
    """
    Draws record dates from an injectable random source.

    Args:
        rng: Random source; pass a seeded ``random.Random`` for reproducible runs
        now: Anchor instant; defaults to the current UTC time at construction
        window_days: Offsets are drawn from ``0 .. window_days - 1``
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        now: datetime | None = None,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ):
        if window_days < 1:
            raise ValueError("window_days must be at least 1")
        self.rng = rng or random.Random()
        self.now = ensure_utc(now) if now is not None else utcnow()
        self.window_days = window_days

    @classmethod
    def seeded(cls, seed: int | None, now: datetime | None = None) -> "DateSynthesizer":
        return cls(rng=random.Random(seed), now=now)

    def draw(self) -> datetime:
        offset_days = self.rng.randrange(self.window_days)
        return self.now - timedelta(days=offset_days)
