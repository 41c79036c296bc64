"""Financial monitoring limits for P2P payments."""

from typing import Optional

from rozetkapay.codec import FlexibleDecimal, FlexibleInt32
from rozetkapay.models.base import WireModel


class FinMonP2PPaymentPreLimitsResponse(WireModel):
    """What a recipient may still receive before monitoring limits apply."""

    recipient_ipn: Optional[str] = None
    amount_left: FlexibleDecimal = None
    total_count_left: FlexibleInt32 = None
    card_only_count_left: FlexibleInt32 = None
