"""Duration codec for configuration fields.

A duration may be given either as a raw number of nanoseconds or as a
human-readable string such as "2h30m" or "1.5s". Encoding always produces
the string form, omitting zero components ("2h", not "2h0m0s").
"""

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from backman.config.errors import InvalidDurationError

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# Durations are bounded by a signed 64-bit nanosecond count
MAX_NANOSECONDS = 2**63 - 1
MIN_NANOSECONDS = -(2**63)

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|s|m|h)"
_COMPONENT = re.compile(rf"({_NUMBER})({_UNIT})")
_DURATION = re.compile(rf"[-+]?(?:{_NUMBER}{_UNIT})+")


def nanoseconds_to_timedelta(ns: int) -> timedelta:
    """Convert nanoseconds to a timedelta, truncating below microseconds.

    Raises:
        InvalidDurationError: If the value does not fit a signed 64-bit
            nanosecond count
    """
    if not MIN_NANOSECONDS <= ns <= MAX_NANOSECONDS:
        raise InvalidDurationError(f"invalid duration: {ns}ns out of range")
    seconds, remainder = divmod(ns, SECOND)
    try:
        return timedelta(seconds=seconds, microseconds=remainder // MICROSECOND)
    except OverflowError as e:
        raise InvalidDurationError(f"invalid duration: {ns}ns out of range") from e


def parse_duration(text: str) -> timedelta:
    """Parse a duration string like "300ms", "-1.5h" or "2h45m".

    Args:
        text: Duration string

    Returns:
        Parsed duration

    Raises:
        InvalidDurationError: If the string is not valid duration syntax
    """
    if text in ("0", "+0", "-0"):
        return timedelta(0)
    if not _DURATION.fullmatch(text):
        raise InvalidDurationError(f"invalid duration {text!r}")

    sign = -1 if text.startswith("-") else 1
    total = Decimal(0)
    try:
        for number, unit in _COMPONENT.findall(text):
            total += Decimal(number) * UNITS[unit]
    except InvalidOperation as e:
        raise InvalidDurationError(f"invalid duration {text!r}") from e

    return nanoseconds_to_timedelta(sign * int(total))


def decode_duration(value: Any) -> timedelta:
    """Decode a duration from either of its accepted JSON shapes.

    Numbers are nanoseconds, strings use duration syntax. Every other
    shape (booleans, objects, arrays, null) is rejected.

    Raises:
        InvalidDurationError: If the value has an unsupported shape or
            the string cannot be parsed
    """
    if isinstance(value, timedelta):
        return value
    # bool is an int subclass, reject it before the numeric branch
    if isinstance(value, bool):
        raise InvalidDurationError("invalid duration: got a boolean")
    if isinstance(value, int | float):
        try:
            return nanoseconds_to_timedelta(int(value))
        except (OverflowError, ValueError) as e:
            raise InvalidDurationError(f"invalid duration {value!r}") from e
    if isinstance(value, str):
        return parse_duration(value)
    raise InvalidDurationError(f"invalid duration: got {type(value).__name__}")


def _with_fraction(value: int, scale: int, unit: str) -> str:
    whole, frac = divmod(value, scale)
    if frac == 0:
        return f"{whole}{unit}"
    digits = str(frac).rjust(len(str(scale)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}{unit}"


def encode_duration(td: timedelta) -> str:
    """Encode a duration as a compact human-readable string."""
    micros = td // timedelta(microseconds=1)
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1000:
        return f"{sign}{micros}us"
    if micros < 1_000_000:
        return f"{sign}{_with_fraction(micros, 1000, 'ms')}"

    hours, micros = divmod(micros, 3600 * 1_000_000)
    minutes, micros = divmod(micros, 60 * 1_000_000)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if micros:
        parts.append(_with_fraction(micros, 1_000_000, "s"))
    return sign + "".join(parts)


Duration = Annotated[
    timedelta,
    BeforeValidator(decode_duration),
    PlainSerializer(encode_duration, return_type=str),
]
