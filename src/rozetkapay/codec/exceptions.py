"""
Decode errors raised while reading wire values.

These are contract errors, not transient failures: the executor never
retries them. DecodeError intentionally does not derive from ValueError,
so pydantic propagates it unchanged instead of folding it into a
ValidationError.
"""

from typing import Any

from rozetkapay.exceptions import RozetkaPayError


class DecodeError(RozetkaPayError):
    """
    A wire value could not be decoded into its target type.

    Attributes:
        raw_value: The offending value as received
        target_type: Name of the type the value was decoded into
        precision_loss: True when a fractional value was refused for an integer target
    """

    def __init__(
        self,
        raw_value: Any,
        target_type: str,
        reason: str | None = None,
        *,
        precision_loss: bool = False,
    ) -> None:
        message = f"Unable to convert {raw_value!r} to {target_type}"
        if precision_loss:
            message += " without precision loss"
        elif reason:
            message += f": {reason}"
        super().__init__(
            message,
            details={"target_type": target_type, "precision_loss": precision_loss},
        )
        self.raw_value = raw_value
        self.target_type = target_type
        self.precision_loss = precision_loss


class ResponseDecodeError(DecodeError):
    """
    A successful response body could not be turned into the declared model.

    The body itself is never stored on the error; only the target type and
    a short reason are kept.
    """

    def __init__(self, target_type: str, reason: str) -> None:
        super().__init__(None, target_type, reason)
        self.message = f"Unable to deserialize {target_type} response: {reason}"
        self.args = (self.message,)
