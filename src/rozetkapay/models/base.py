"""Base class for request and response wire models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """
    Pydantic model mirroring a JSON object of the API.

    Field names are the API's snake_case names. Unknown fields are kept
    (extra="allow") so responses from newer API versions round-trip.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        str_strip_whitespace=False,
    )

    def to_wire(self) -> dict[str, Any]:
        """
        JSON-ready dict with null fields omitted, used for query strings.

        Decimals come out as exact strings; request bodies go through the
        executor instead, which keeps them as JSON numbers.
        """
        return self.model_dump(mode="json", exclude_none=True)
