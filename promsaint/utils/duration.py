"""
Go style duration strings.

The monitoring engine passes fire periods the way Go's ``flag.Duration``
understands them (``90s``, ``1h30m``, ``1.5h``) and the daemon expects them
back in ``time.Duration.String()`` form (``1m30s``, ``1h30m0s``).
"""

import re
from datetime import timedelta
from fractions import Fraction

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# Go durations are int64 nanoseconds
MAX_DURATION = 2**63 - 1
MIN_DURATION = -(2**63)

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT_RE = re.compile(r"(\d*(?:\.\d*)?)([^\d.]+)")


def parse_duration(value: str) -> int:
    """Parse a Go duration string such as ``-1h30m`` or ``250ms`` into nanoseconds.

    Raises:
        ValueError: if the string is not a valid duration.
    """
    original = value
    if not value:
        raise ValueError(f"invalid duration {original!r}")

    negative = False
    if value[0] in "+-":
        negative = value[0] == "-"
        value = value[1:]

    if value == "0":
        return 0
    if not value:
        raise ValueError(f"invalid duration {original!r}")

    total = Fraction(0)
    position = 0
    while position < len(value):
        match = _COMPONENT_RE.match(value, position)
        if not match:
            raise ValueError(f"invalid duration {original!r}")
        number, unit = match.groups()
        if number in ("", "."):
            raise ValueError(f"invalid duration {original!r}")
        if unit not in UNITS:
            raise ValueError(f"unknown unit {unit!r} in duration {original!r}")
        total += Fraction(number) * UNITS[unit]
        position = match.end()

    nanoseconds = -int(total) if negative else int(total)
    if not MIN_DURATION <= nanoseconds <= MAX_DURATION:
        raise ValueError(f"invalid duration {original!r}")
    return nanoseconds


def _format_fraction(value: int, unit: int) -> str:
    whole, remainder = divmod(value, unit)
    if not remainder:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{remainder:0{digits}d}".rstrip("0")


def to_nanoseconds(value: timedelta) -> int:
    return (
        (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    ) * MICROSECOND


def format_duration(nanoseconds: int) -> str:
    """Render a nanosecond count the way Go's ``time.Duration.String()`` does."""
    if nanoseconds == 0:
        return "0s"

    sign = "-" if nanoseconds < 0 else ""
    nanoseconds = abs(nanoseconds)

    if nanoseconds < SECOND:
        if nanoseconds < MICROSECOND:
            return f"{sign}{nanoseconds}ns"
        if nanoseconds < MILLISECOND:
            return f"{sign}{_format_fraction(nanoseconds, MICROSECOND)}µs"
        return f"{sign}{_format_fraction(nanoseconds, MILLISECOND)}ms"

    hours, remainder = divmod(nanoseconds, HOUR)
    minutes, remainder = divmod(remainder, MINUTE)
    formatted = f"{_format_fraction(remainder, SECOND)}s"
    if hours or minutes:
        formatted = f"{minutes}m{formatted}"
    if hours:
        formatted = f"{hours}h{formatted}"
    return f"{sign}{formatted}"
