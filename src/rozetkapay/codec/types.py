"""
Pydantic field types backed by the tolerant decoders.

Use these on every numeric and date field of a wire model:

    class PaymentResponse(WireModel):
        amount: FlexibleDecimal = None
        created_at: FlexibleDateTime = None

Validation runs the tolerant decoder before pydantic's own checks. JSON mode
dumps write decimals as exact plain-notation strings ("100.00") and dates
as ISO-8601 UTC with milliseconds. Python mode keeps Decimal, which the
request executor then writes as an exact JSON number.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from rozetkapay.codec.tolerant import (
    decode_datetime,
    decode_decimal,
    decode_int,
    encode_datetime,
    encode_decimal,
)


def _nullable_decimal(value: Any) -> Decimal | None:
    return decode_decimal(value, nullable=True)


def _decimal(value: Any) -> Decimal:
    return decode_decimal(value, nullable=False)


def _nullable_int32(value: Any) -> int | None:
    return decode_int(value, bits=32, nullable=True)


def _int32(value: Any) -> int:
    return decode_int(value, bits=32, nullable=False)


def _nullable_int64(value: Any) -> int | None:
    return decode_int(value, bits=64, nullable=True)


def _int64(value: Any) -> int:
    return decode_int(value, bits=64, nullable=False)


def _nullable_datetime(value: Any) -> datetime | None:
    return decode_datetime(value, nullable=True)


def _datetime(value: Any) -> datetime:
    return decode_datetime(value, nullable=False)


_decimal_serializer = PlainSerializer(
    encode_decimal, return_type=str, when_used="json-unless-none"
)
_datetime_serializer = PlainSerializer(
    encode_datetime, return_type=str, when_used="json-unless-none"
)

FlexibleDecimal = Annotated[Decimal | None, BeforeValidator(_nullable_decimal), _decimal_serializer]
StrictAmount = Annotated[Decimal, BeforeValidator(_decimal), _decimal_serializer]

FlexibleInt32 = Annotated[int | None, BeforeValidator(_nullable_int32)]
Int32 = Annotated[int, BeforeValidator(_int32)]
FlexibleInt64 = Annotated[int | None, BeforeValidator(_nullable_int64)]
Int64 = Annotated[int, BeforeValidator(_int64)]

FlexibleDateTime = Annotated[datetime | None, BeforeValidator(_nullable_datetime), _datetime_serializer]
RequiredDateTime = Annotated[datetime, BeforeValidator(_datetime), _datetime_serializer]
