"""User domain schemas - Pydantic models for validation"""

from pydantic import BaseModel, Field, StrictStr


class CredentialsRequest(BaseModel):
    """Schema for signup and login bodies"""

    email: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)


class TokenResponse(BaseModel):
    token: str
    email: str
