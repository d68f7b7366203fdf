"""Appointment domain schemas - Pydantic models for validation"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictStr


class AppointmentCreate(BaseModel):
    """Schema for booking a new appointment"""

    service: StrictStr = Field(min_length=1)
    date: StrictStr = Field(min_length=1)
    time: StrictStr = Field(min_length=1)
    notes: Optional[str] = None
    customerName: Optional[str] = None
    customerPhone: Optional[str] = None
    customerEmail: Optional[str] = None
    stylistId: Optional[Union[int, str]] = None


class AppointmentUpdate(BaseModel):
    """
    Schema for a staff status/notes update.

    An empty status leaves the status unchanged; notes are replaced whenever
    the key is sent, including an explicit null.
    """

    status: Optional[str] = None
    notes: Optional[str] = None


class PaymentConfirmation(BaseModel):
    """Deposit details reported by the frontend after Stripe checkout"""

    paymentIntentId: Optional[str] = None
    depositAmount: Optional[Union[int, float]] = None
