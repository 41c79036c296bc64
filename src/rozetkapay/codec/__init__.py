"""
Tolerant decoding of loosely-typed wire values.

Components:
- tolerant: Plain decoder/encoder functions (decimal, int32/int64, datetime)
- types: Annotated pydantic field types built on the decoders
- exceptions: DecodeError and ResponseDecodeError
"""

from rozetkapay.codec.exceptions import DecodeError, ResponseDecodeError
from rozetkapay.codec.tolerant import (
    DATETIME_MIN,
    decode_datetime,
    decode_decimal,
    decode_int,
    encode_datetime,
    encode_decimal,
)
from rozetkapay.codec.types import (
    FlexibleDateTime,
    FlexibleDecimal,
    FlexibleInt32,
    FlexibleInt64,
    Int32,
    Int64,
    RequiredDateTime,
    StrictAmount,
)

__all__ = [
    "DecodeError",
    "ResponseDecodeError",
    "DATETIME_MIN",
    "decode_decimal",
    "decode_int",
    "decode_datetime",
    "encode_datetime",
    "encode_decimal",
    "FlexibleDecimal",
    "StrictAmount",
    "FlexibleInt32",
    "FlexibleInt64",
    "Int32",
    "Int64",
    "FlexibleDateTime",
    "RequiredDateTime",
]
