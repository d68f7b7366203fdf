"""Stored records. Field names follow the JSON the storefront frontend consumes."""

from datetime import datetime, timezone
from typing import Any, Optional, Union

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    id: int
    email: str
    passwordHash: str


class Product(BaseModel):
    id: int
    name: str
    price: Union[int, float]
    image: str
    description: str
    category: str = ""
    duration: Optional[int] = None  # minutes


class Order(BaseModel):
    id: int
    items: list[Any]
    total: Union[int, float]
    customer: dict[str, Any]
    paymentIntentId: str
    userId: int
    date: datetime = Field(default_factory=utcnow)


class Appointment(BaseModel):
    id: int
    userId: int
    service: str
    date: str
    time: str
    notes: Optional[str] = ""
    customerName: str = ""
    customerPhone: str = ""
    customerEmail: str = ""
    stylistId: Optional[Union[int, str]] = None
    # Free-form by default; see domain.appointments.statuses
    status: str
    paymentStatus: str
    depositPaid: bool = False
    paymentIntentId: Optional[str] = None
    depositAmount: Optional[Union[int, float]] = None
    createdAt: datetime = Field(default_factory=utcnow)
    paidAt: Optional[datetime] = None
