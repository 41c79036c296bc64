"""
Masking of card numbers in text that may reach logs or error messages.

The upstream API occasionally echoes request fields back inside error
messages. Error messages are taken only from the `message`/`error` fields,
and those are additionally passed through mask_card_numbers() so a PAN
never ends up in an exception or a log line.
"""

import re

import structlog


logger = structlog.get_logger(__name__)

# 12-19 digits, optionally grouped by spaces or dashes (PAN lengths)
_PAN_RE = re.compile(r"(?<!\d)(?:\d[ -]?){11,18}\d(?!\d)")


def mask_card_numbers(text: str) -> str:
    """
    Replace card-number-like digit runs with a masked form keeping the last 4 digits.

    Examples:
        >>> mask_card_numbers("Card 4111111111111111 declined")
        'Card ************1111 declined'
        >>> mask_card_numbers("Order 12345 failed")
        'Order 12345 failed'
    """
    masked_count = 0

    def _mask(match: re.Match[str]) -> str:
        nonlocal masked_count
        digits = re.sub(r"\D", "", match.group(0))
        masked_count += 1
        return "*" * (len(digits) - 4) + digits[-4:]

    result = _PAN_RE.sub(_mask, text)
    if masked_count:
        logger.debug("Masked card numbers in text", masked_count=masked_count)
    return result
