"""
Elapsed-time parsing and formatting.

Durations are written as a sequence of decimal numbers, each with an
optional fraction and a unit suffix, e.g. "3m38s", "1h2m", "1.5s", "250ms".
An optional leading sign is allowed. Valid units are "h", "m", "s", "ms",
"us" (or "µs"/"μs") and "ns".

Values are held as ``datetime.timedelta``, so anything finer than a
microsecond is rounded.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

# Microseconds per unit
UNIT_MICROSECONDS: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # U+00B5 micro sign
    "μs": Decimal(1),  # U+03BC greek mu
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration string into a timedelta.

    Args:
        text: Duration text such as "3m38s" or "-1.5h".

    Returns:
        The parsed duration.

    Raises:
        ValueError: If the text is empty, has a component without a unit,
            uses an unknown unit, or is too large for a timedelta.

    Examples:
        >>> parse_duration("3m38s")
        datetime.timedelta(seconds=218)
        >>> parse_duration("1.5s").total_seconds()
        1.5
    """
    original = text
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    # A bare zero is the only unitless value accepted
    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"Invalid duration {original!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise ValueError(f"Invalid duration {original!r}")
        number, unit = match.groups()
        try:
            total += Decimal(number) * UNIT_MICROSECONDS[unit]
        except InvalidOperation as exc:
            raise ValueError(f"Invalid duration {original!r}") from exc
        pos = match.end()

    try:
        return timedelta(microseconds=sign * int(total.to_integral_value()))
    except OverflowError as exc:
        raise ValueError(f"Invalid duration {original!r}: out of range") from exc


def _trim_fraction(whole: int, fraction: int, digits: int) -> str:
    """Render ``whole.fraction`` without trailing zeros."""
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Format a timedelta as a compact elapsed-time string.

    Durations of a second or more use hours, minutes and seconds
    ("1h0m0s", "3m38s", "4.25s"). Shorter ones use "ms" or "µs".
    A zero duration is "0s".

    Examples:
        >>> format_duration(timedelta(minutes=3, seconds=38))
        '3m38s'
        >>> format_duration(timedelta(hours=1))
        '1h0m0s'
    """
    micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        millis, rest = divmod(micros, 1_000)
        return f"{sign}{_trim_fraction(millis, rest, 3)}ms"

    whole_seconds, fraction = divmod(micros, 1_000_000)
    hours, remainder = divmod(whole_seconds, 3_600)
    minutes, seconds = divmod(remainder, 60)
    seconds_text = _trim_fraction(seconds, fraction, 6)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds_text}s"
    if minutes:
        return f"{sign}{minutes}m{seconds_text}s"
    return f"{sign}{seconds_text}s"
