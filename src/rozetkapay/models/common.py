"""Models shared by several API areas."""

from enum import Enum
from typing import Optional

from rozetkapay.codec import FlexibleDecimal, FlexibleInt32
from rozetkapay.models.base import WireModel


class OperationStatus(str, Enum):
    INIT = "init"
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class PaymentMode(str, Enum):
    DIRECT = "direct"
    HOSTED = "hosted"
    EXPRESS_CHECKOUT = "express_checkout"


class PaymentMethodType(str, Enum):
    CC_TOKEN = "cc_token"
    CC_NUMBER = "cc_number"
    WALLET = "wallet"
    GOOGLE_PAY = "google_pay"
    APPLE_PAY = "apple_pay"
    CARD = "card"


class UserAction(WireModel):
    """Follow-up the payer must perform (e.g. open a 3-DS URL)."""

    type: Optional[str] = None
    value: Optional[str] = None


class UserInfo(WireModel):
    browser_user_agent: Optional[str] = None
    email: Optional[str] = None
    external_id: Optional[str] = None
    first_name: Optional[str] = None
    ip_address: Optional[str] = None
    last_name: Optional[str] = None
    patronym: Optional[str] = None
    phone: Optional[str] = None


class BrowserFingerprint(WireModel):
    browser_accept_header: str = ""
    browser_color_depth: str = ""
    browser_ip_address: str = ""
    browser_java_enabled: str = ""
    browser_language: str = ""
    browser_screen_height: str = ""
    browser_screen_width: str = ""
    browser_time_zone: str = ""
    browser_time_zone_offset: str = ""
    browser_user_agent: str = ""


class Product(WireModel):
    name: Optional[str] = None
    price: FlexibleDecimal = None
    quantity: FlexibleInt32 = None
    sku: Optional[str] = None
    category: Optional[str] = None


class FeeDetails(WireModel):
    amount: FlexibleDecimal = None
    currency: Optional[str] = None
    rate: FlexibleDecimal = None


class ApiMessage(WireModel):
    """Generic {"status", "message"} acknowledgement body."""

    status: Optional[str] = None
    message: Optional[str] = None
