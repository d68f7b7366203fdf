"""Order domain schemas - Pydantic models for validation"""

from typing import Any, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr


class OrderCreate(BaseModel):
    """Checkout payload. Line items are stored as a snapshot, not product references."""

    items: list[Any]
    total: Union[StrictInt, StrictFloat]
    customer: dict[str, Any]
    paymentIntentId: StrictStr = Field(min_length=1)
