"""Catalog domain schemas - Pydantic models for validation"""

from typing import Annotated, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

# Whole-number prices stay integers in responses
PositivePrice = Union[Annotated[StrictInt, Field(gt=0)], Annotated[StrictFloat, Field(gt=0)]]


class ProductPayload(BaseModel):
    """Schema for creating or replacing a product"""

    name: StrictStr = Field(min_length=1)
    price: PositivePrice
    image: StrictStr = Field(min_length=1)
    description: StrictStr = Field(min_length=1)
    category: Optional[StrictStr] = None
    duration: Optional[StrictInt] = Field(default=None, gt=0)
