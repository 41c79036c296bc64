"""
Tolerant decoders for loosely-typed wire values.

The RozetkaPay API sometimes sends amounts as strings ("0.00" instead of
0.00), integers as strings, and dates in several layouts or as Unix
timestamps. These decoders accept every observed variant and produce
canonical Python values:

    - decode_decimal: Decimal (never float, so amounts keep full precision)
    - decode_int: int within the signed 32/64-bit range
    - decode_datetime: timezone-aware datetime in UTC

Anything else raises DecodeError naming the raw value and target type.
Only two conventions substitute a value silently:

    - None/empty string -> None (nullable) or zero (non-nullable numbers)
    - empty string -> DATETIME_MIN for dates (upstream quirk)
"""

import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from rozetkapay.codec.exceptions import DecodeError

# Sentinel for the upstream API's empty-string dates. Keep this for wire
# compatibility on existing fields only.
DATETIME_MIN = datetime.min.replace(tzinfo=timezone.utc)

_INT_RANGES = {
    32: (-(2 ** 31), 2 ** 31 - 1),
    64: (-(2 ** 63), 2 ** 63 - 1),
}

# Optional sign, digits (plain or grouped by thousands), optional fraction
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+|\d{1,3}(?:,\d{3})+)?(?:\.\d*)?$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")

# Layouts tried after ISO-8601 parsing fails
DATE_FORMATS = (
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y",
)


def _parse_number(raw: str, target_type: str) -> Decimal:
    text = raw.strip()
    if not _NUMBER_RE.match(text) or not any(ch.isdigit() for ch in text):
        raise DecodeError(raw, target_type, "not a number")
    try:
        return Decimal(text.replace(",", ""))
    except InvalidOperation as e:
        raise DecodeError(raw, target_type, "not a number") from e


def decode_decimal(value: Any, *, nullable: bool = True) -> Decimal | None:
    """
    Decode a JSON number or numeric string into a Decimal.

    Args:
        value: Raw wire value (int, float, Decimal, str or None)
        nullable: Whether missing values decode to None (else Decimal("0"))

    Raises:
        DecodeError: For booleans, non-finite numbers and non-numeric strings

    Examples:
        >>> decode_decimal("12.34")
        Decimal('12.34')
        >>> decode_decimal("", nullable=False)
        Decimal('0')
    """
    target_type = "decimal" if not nullable else "nullable decimal"
    empty = None if nullable else Decimal("0")

    if value is None:
        return empty
    if isinstance(value, bool):
        raise DecodeError(value, target_type, "boolean is not a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # repr() gives the shortest round-tripping text, avoiding binary noise
        result = Decimal(repr(value))
    elif isinstance(value, str):
        if not value.strip():
            return empty
        result = _parse_number(value, target_type)
    else:
        raise DecodeError(value, target_type, f"unexpected type {type(value).__name__}")

    if not result.is_finite():
        raise DecodeError(value, target_type, "not a finite number")
    return result


def decode_int(value: Any, *, bits: int = 32, nullable: bool = True) -> int | None:
    """
    Decode a JSON number or numeric string into an integer.

    "123" and "123.0" decode to 123; "123.5" is refused as precision loss,
    never rounded or truncated.

    Args:
        value: Raw wire value
        bits: 32 or 64, the signed range the result must fit
        nullable: Whether missing values decode to None (else 0)

    Raises:
        DecodeError: Precision loss, out of range, or non-numeric input
    """
    if bits not in _INT_RANGES:
        raise ValueError(f"bits must be 32 or 64, got {bits}")

    target_type = f"int{bits}" if not nullable else f"nullable int{bits}"
    empty = None if nullable else 0

    if value is None:
        return empty
    if isinstance(value, bool):
        raise DecodeError(value, target_type, "boolean is not a number")

    if isinstance(value, int):
        result = value
    elif isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        result = int(value.strip())
    else:
        if isinstance(value, str):
            if not value.strip():
                return empty
            number = _parse_number(value, target_type)
        elif isinstance(value, (float, Decimal)):
            number = Decimal(repr(value)) if isinstance(value, float) else value
            if not number.is_finite():
                raise DecodeError(value, target_type, "not a finite number")
        else:
            raise DecodeError(value, target_type, f"unexpected type {type(value).__name__}")

        if number != number.to_integral_value():
            raise DecodeError(value, target_type, precision_loss=True)
        result = int(number)

    low, high = _INT_RANGES[bits]
    if not low <= result <= high:
        raise DecodeError(value, target_type, "out of range")
    return result


def _to_utc(parsed: datetime) -> datetime:
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def decode_datetime(value: Any, *, nullable: bool = True) -> datetime | None:
    """
    Decode an ISO-8601 string, an alternate layout, or Unix epoch seconds.

    Accepted:
        "2026-02-28T10:20:30Z", "2026-02-28T10:20:30.123+02:00",
        "2026-02-28 10:20:30", "2026-02-28",
        "28.02.2026 10:20:30", "28.02.2026",
        1700000000

    Naive values are taken as UTC; the result is always aware UTC.
    An empty string yields DATETIME_MIN.

    Raises:
        DecodeError: Unparseable strings, unsupported types, or None when
            nullable is False
    """
    target_type = "datetime" if not nullable else "nullable datetime"

    if value is None:
        if nullable:
            return None
        raise DecodeError(value, target_type, "null is not a date")
    if isinstance(value, datetime):
        return _to_utc(value)
    if isinstance(value, bool):
        raise DecodeError(value, target_type, "boolean is not a date")
    if isinstance(value, (int, float, Decimal)):
        return _from_unix(value, target_type)
    if not isinstance(value, str):
        raise DecodeError(value, target_type, f"unexpected type {type(value).__name__}")

    if value == "":
        return DATETIME_MIN

    text = value.strip()
    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return _to_utc(datetime.fromisoformat(iso_text))
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue

    raise DecodeError(value, target_type, "unrecognised date format")


def _from_unix(value: int | float | Decimal, target_type: str) -> datetime:
    if isinstance(value, float) and not value.is_integer():
        raise DecodeError(value, target_type, "Unix timestamp must be whole seconds")
    if isinstance(value, Decimal) and (
        not value.is_finite() or value != value.to_integral_value()
    ):
        raise DecodeError(value, target_type, "Unix timestamp must be whole seconds")
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise DecodeError(value, target_type, "Unix timestamp out of range") from e


def encode_datetime(value: datetime) -> str:
    """Serialize as ISO-8601 UTC with millisecond precision ("...T10:20:30.000Z")."""
    # isoformat() keeps four-digit years, strftime("%Y") does not below year 1000
    value = _to_utc(value).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def encode_decimal(value: Decimal) -> str:
    """
    Exact JSON number text for a Decimal, in plain notation.

    Scale is kept ("100.00" stays "100.00") and exponents are expanded, so
    the value on the wire is the value the caller built. NaN and infinity
    have no JSON form and raise ValueError.
    """
    if not value.is_finite():
        raise ValueError(f"Cannot encode non-finite decimal {value!r} as a JSON number")
    return format(value, "f")
