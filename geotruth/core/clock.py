"""
Simulated Clock
===============

The shared simulated instant (day of year + hour of day) that drives
every view, and the single state transition that advances it.

Both quantities are circular: hours wrap at 24 and carry into the day,
days wrap within 1..365. The calendar has no leap day, so the instant
maps onto a UTC timestamp of any non-leap reference year and back
exactly.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import numpy as np

from geotruth.utils.constants import DAYS_PER_YEAR, HOURS_PER_DAY

DEFAULT_REFERENCE_YEAR = 2025


def wrap_day_of_year(day: int) -> int:
    """Wrap any integer day into 1..365."""
    return int((int(day) - 1) % DAYS_PER_YEAR) + 1


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@dataclass(frozen=True)
class SimulatedInstant:
    """
    Simulated UTC instant.

    Attributes
    ----------
    day_of_year : int
        Day in 1..365 (January 1 is day 1)
    hour_of_day : float
        UTC hour in [0, 24)

    Out-of-range values are carried: ``SimulatedInstant(1, 25.0)`` is
    day 2, 01:00 and ``SimulatedInstant(1, -1.0)`` is day 365, 23:00.
    """
    day_of_year: int = 1
    hour_of_day: float = 0.0

    def __post_init__(self):
        if not np.isfinite(self.hour_of_day):
            raise ValueError(f"Hour of day must be finite. Got {self.hour_of_day}")

        carry, hour = divmod(float(self.hour_of_day), HOURS_PER_DAY)
        if hour >= HOURS_PER_DAY:
            # divmod can round a tiny negative remainder up to 24
            carry, hour = carry + 1, 0.0

        object.__setattr__(self, "hour_of_day", hour)
        object.__setattr__(
            self, "day_of_year", wrap_day_of_year(int(self.day_of_year) + int(carry))
        )

    def to_datetime(self, year: int = DEFAULT_REFERENCE_YEAR) -> datetime:
        """
        UTC datetime of this instant in a reference year.

        Raises
        ------
        ValueError
            For leap reference years, where day numbers after February
            would not round-trip
        """
        if _is_leap(year):
            raise ValueError(f"Reference year must not be a leap year. Got {year}")
        start = datetime(year, 1, 1, tzinfo=timezone.utc)
        return start + timedelta(days=self.day_of_year - 1, hours=self.hour_of_day)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "SimulatedInstant":
        """
        Instant of a datetime (naive values are taken as UTC).

        In leap years February 29 shares day 59 with February 28, so
        December 31 is still day 365.
        """
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        moment = moment.astimezone(timezone.utc)

        start = datetime(moment.year, 1, 1, tzinfo=timezone.utc)
        elapsed = moment - start
        hours = elapsed.seconds / 3600 + elapsed.microseconds / 3.6e9

        day = elapsed.days + 1
        if _is_leap(moment.year) and day > 59:
            # drop February 29 so the day count matches the 365-day model
            day -= 1

        return cls(day, hours)

    @property
    def fractional_day(self) -> float:
        """Days since January 1, 00:00 (0 .. 365)."""
        return self.day_of_year - 1 + self.hour_of_day / HOURS_PER_DAY


def advance_time(
    instant: SimulatedInstant,
    delta_seconds: float,
    speed_multiplier: float = 1.0,
) -> SimulatedInstant:
    """
    Advance the simulated clock by one animation tick.

    Parameters
    ----------
    instant : SimulatedInstant
        Current instant
    delta_seconds : float
        Real (wall-clock) seconds elapsed since the last tick
    speed_multiplier : float
        Simulated hours per real second (1 = one hour per second,
        24 = one day per second, 8760 = one year per second)

    Returns
    -------
    instant : SimulatedInstant
        New instant; the input is unchanged. A zero delta returns an
        equal instant.
    """
    hours = delta_seconds * speed_multiplier
    if hours == 0:
        return instant
    return SimulatedInstant(instant.day_of_year, instant.hour_of_day + hours)


def current_instant(now: Optional[datetime] = None) -> SimulatedInstant:
    """Instant for ``now`` (defaults to the current UTC time)."""
    if now is None:
        now = datetime.now(timezone.utc)
    return SimulatedInstant.from_datetime(now)
