"""
TTL Normalization

Converts a caller TTL expressed in hours, minutes, seconds or milliseconds
into one of the two expiry units Redis understands natively:

    h  -> EX (seconds x 3600)
    m  -> EX (seconds x 60)
    s  -> EX (unchanged)
    ms -> PX (unchanged)
"""

from dataclasses import dataclass
from enum import Enum

from kvcache.core.config.constants import (
    DEFAULT_TTL_UNIT,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from kvcache.core.exceptions import InvalidArgumentError


class TimeUnit(str, Enum):
    """Accepted TTL units (case-insensitive on input)."""

    HOURS = "h"
    MINUTES = "m"
    SECONDS = "s"
    MILLISECONDS = "ms"


class ExpiryMode(str, Enum):
    """Redis SET expiry options."""

    EX = "EX"  # seconds
    PX = "PX"  # milliseconds


_SECOND_MULTIPLIERS = {
    TimeUnit.HOURS: SECONDS_PER_HOUR,
    TimeUnit.MINUTES: SECONDS_PER_MINUTE,
    TimeUnit.SECONDS: 1,
}


@dataclass(frozen=True)
class Expiry:
    """A TTL already expressed in a store-native unit."""

    mode: ExpiryMode
    amount: int

    def as_set_kwargs(self) -> dict[str, int]:
        """Keyword arguments for ``redis.asyncio.Redis.set``."""
        if self.mode is ExpiryMode.PX:
            return {"px": self.amount}
        return {"ex": self.amount}


def parse_unit(unit: str) -> TimeUnit:
    """
    Resolve a unit string to a TimeUnit.

    Raises:
        InvalidArgumentError: If the unit is not one of h/m/s/ms
    """
    if not isinstance(unit, str):
        raise InvalidArgumentError(
            "[cache]: unit must be h/m/s/ms",
            details={"unit": repr(unit), "allowed": [u.value for u in TimeUnit]},
        )
    try:
        return TimeUnit(unit.lower())
    except ValueError:
        raise InvalidArgumentError(
            "[cache]: unit must be h/m/s/ms",
            details={"unit": unit, "allowed": [u.value for u in TimeUnit]},
        ) from None


def normalize_ttl(ttl: int | float, unit: str = DEFAULT_TTL_UNIT) -> Expiry:
    """
    Normalize a TTL to seconds (EX) or milliseconds (PX).

    Fractional durations are fine as long as they convert to a whole number
    of store units: 0.5 h is EX 1800, but 1.5 s has no EX equivalent.

    Zero is passed through untouched; whether a zero expiry is accepted is
    up to the store.

    Args:
        ttl: Non-negative duration
        unit: One of h/m/s/ms, any case

    Returns:
        Expiry ready to be submitted with SET

    Raises:
        InvalidArgumentError: On a bad unit, a negative TTL, a non-numeric TTL
            or one that is not a whole number of seconds/milliseconds
    """
    # bool is an int subclass but never a meaningful duration
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise InvalidArgumentError(
            "[cache]: ttl must be a number",
            details={"ttl": repr(ttl)},
        )
    if ttl < 0:
        raise InvalidArgumentError(
            "[cache]: ttl must not be negative",
            details={"ttl": ttl},
        )

    time_unit = parse_unit(unit)

    if time_unit is TimeUnit.MILLISECONDS:
        mode, amount = ExpiryMode.PX, ttl
    else:
        mode, amount = ExpiryMode.EX, ttl * _SECOND_MULTIPLIERS[time_unit]

    # rejects NaN and infinity as well
    if isinstance(amount, float) and not amount.is_integer():
        raise InvalidArgumentError(
            "[cache]: ttl must convert to whole seconds (h/m/s) or milliseconds (ms)",
            details={"ttl": ttl, "unit": time_unit.value, "converted": amount},
        )

    return Expiry(mode, int(amount))
