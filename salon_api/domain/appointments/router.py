"""Appointment router - FastAPI endpoints for bookings"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from ...auth import get_current_user_id
from ...config import STRICT_APPOINTMENT_STATUS
from ...models import Appointment
from ...schemas import SuccessResponse
from ...storage import Stores, get_stores
from .schemas import AppointmentCreate
from .service import AppointmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


def get_appointment_service(stores: Stores = Depends(get_stores)) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(stores.appointments, strict_status=STRICT_APPOINTMENT_STATUS)


# ============================================================================
# LISTING
# ============================================================================


@router.get("", response_model=list[Appointment])
def list_appointments(service: AppointmentService = Depends(get_appointment_service)):
    """All appointments for the salon dashboard. Not authenticated."""
    return service.list_all()


@router.get("/my", response_model=list[Appointment])
def list_my_appointments(
    user_id: int = Depends(get_current_user_id),
    service: AppointmentService = Depends(get_appointment_service),
):
    return service.list_for_user(user_id)


# ============================================================================
# LIFECYCLE
# ============================================================================


@router.post("", response_model=Appointment, status_code=201)
def create_appointment(
    data: AppointmentCreate,
    user_id: int = Depends(get_current_user_id),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Book an appointment; it starts out awaiting the deposit"""
    return service.create_appointment(data, user_id)


@router.put("/{appointment_id}", response_model=Appointment)
def update_appointment(
    appointment_id: int,
    payload: Any = Body(None),
    user_id: int = Depends(get_current_user_id),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Update status and/or notes (staff action)"""
    logger.info(f"User {user_id} updating appointment {appointment_id}")
    return service.apply_update(appointment_id, payload)


@router.delete("/{appointment_id}", response_model=SuccessResponse)
def delete_appointment(
    appointment_id: int,
    user_id: int = Depends(get_current_user_id),
    service: AppointmentService = Depends(get_appointment_service),
):
    logger.info(f"User {user_id} deleting appointment {appointment_id}")
    return service.delete_appointment(appointment_id)


@router.post("/{appointment_id}/confirm-payment", response_model=Appointment)
def confirm_appointment_payment(
    appointment_id: int,
    payload: Any = Body(None),
    user_id: int = Depends(get_current_user_id),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Record the deposit after the frontend completes Stripe checkout"""
    logger.info(f"User {user_id} confirming payment for appointment {appointment_id}")
    return service.apply_payment(appointment_id, payload)
