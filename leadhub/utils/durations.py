import re
from datetime import timedelta

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([a-z]*)\s*$", re.IGNORECASE)

_UNIT_SECONDS = {
    "": 1,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "h": 3600,
    "hr": 3600,
    "hrs": 3600,
    "hour": 3600,
    "hours": 3600,
    "d": 86400,
    "day": 86400,
    "days": 86400,
    "w": 604800,
    "week": 604800,
    "weeks": 604800,
}


def parse_duration(value: str | int) -> timedelta:
    """Parse an expiry such as ``"7d"``, ``"12h"`` or ``"3600"`` into a timedelta.

    A bare number counts as seconds. Unknown units and non-positive
    values raise ``ValueError``.
    """
    if isinstance(value, int):
        seconds = value
    else:
        match = _DURATION_PATTERN.match(str(value))
        if not match:
            raise ValueError(f"Invalid duration: {value!r}")
        amount, unit = match.groups()
        unit_seconds = _UNIT_SECONDS.get(unit.lower())
        if unit_seconds is None:
            raise ValueError(f"Unknown duration unit in {value!r}")
        seconds = int(amount) * unit_seconds

    if seconds <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return timedelta(seconds=seconds)
