"""Payment domain schemas - Pydantic models for validation"""

from typing import Annotated

from pydantic import BaseModel, Field, StrictStr

from ...config import DEFAULT_CURRENCY


class PaymentIntentRequest(BaseModel):
    amount: Annotated[float, Field(gt=0, strict=True)]  # major currency units
    currency: StrictStr = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)


class PaymentIntentResponse(BaseModel):
    clientSecret: str
