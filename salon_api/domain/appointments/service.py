"""Appointment service - booking lifecycle and deposit confirmation"""

import logging
from typing import Any

from ...errors import NotFound, ValidationError
from ...models import Appointment, utcnow
from ...shared.validation import parse_body
from .repository import AppointmentRepository
from .schemas import AppointmentCreate, AppointmentUpdate, PaymentConfirmation
from .statuses import AppointmentStatus, PaymentStatus, can_transition

logger = logging.getLogger(__name__)


class AppointmentService:
    """
    Service layer for appointment business logic.

    Every authenticated caller is trusted with every operation: any token
    holder may update, pay for or delete any appointment. There is no
    separate staff role.
    """

    def __init__(self, repo: AppointmentRepository, strict_status: bool = False):
        self.repo = repo
        self.strict_status = strict_status

    def list_all(self) -> list[Appointment]:
        """Every appointment in the store (served without authentication)"""
        return self.repo.list()

    def list_for_user(self, user_id: int) -> list[Appointment]:
        return self.repo.list_for_user(user_id)

    def create_appointment(self, data: AppointmentCreate, user_id: int) -> Appointment:
        """Book an appointment; it waits for a deposit before staff review"""
        # No availability or double-booking check: date and time are free text
        appointment = self.repo.create_appointment(
            userId=user_id,
            service=data.service,
            date=data.date,
            time=data.time,
            notes=data.notes or "",
            customerName=data.customerName or "",
            customerPhone=data.customerPhone or "",
            customerEmail=data.customerEmail or "",
            stylistId=data.stylistId or None,
            status=AppointmentStatus.PENDING_PAYMENT.value,
            paymentStatus=PaymentStatus.UNPAID.value,
            depositPaid=False,
        )
        logger.info(
            f"📅 Appointment {appointment.id} created for user {user_id}: "
            f"{appointment.service} on {appointment.date} at {appointment.time}"
        )
        return appointment

    def update_status(
        self, appointment_id: int, data: AppointmentUpdate, notes_sent: bool
    ) -> Appointment:
        """Staff update of status and/or notes"""

        def compute_changes(current: Appointment) -> dict:
            changes: dict = {}
            if data.status:
                if self.strict_status and not can_transition(current.status, data.status):
                    logger.warning(
                        f"⚠️ Rejected status change for appointment {appointment_id}: "
                        f"{current.status} → {data.status}"
                    )
                    raise ValidationError(
                        f"Cannot change appointment status from '{current.status}' to '{data.status}'"
                    )
                changes["status"] = data.status
            if notes_sent:
                changes["notes"] = data.notes
            return changes

        appointment = self.repo.modify(appointment_id, compute_changes)
        if not appointment:
            raise NotFound("Appointment not found")

        logger.info(f"✅ Appointment {appointment_id} updated: status={appointment.status}")
        return appointment

    def apply_update(self, appointment_id: int, payload: Any) -> Appointment:
        """
        Apply a raw update body to an existing appointment.

        An unknown id is reported before the body is validated. A missing
        body is an empty update.
        """
        if not self.repo.get(appointment_id):
            raise NotFound("Appointment not found")
        data = parse_body(AppointmentUpdate, {} if payload is None else payload)
        return self.update_status(appointment_id, data, notes_sent="notes" in data.model_fields_set)

    def apply_payment(self, appointment_id: int, payload: Any) -> Appointment:
        """Confirm a deposit from a raw body once the appointment is known to exist"""
        if not self.repo.get(appointment_id):
            raise NotFound("Appointment not found")
        data = parse_body(PaymentConfirmation, {} if payload is None else payload)
        return self.confirm_payment(appointment_id, data)

    def confirm_payment(self, appointment_id: int, data: PaymentConfirmation) -> Appointment:
        """
        Mark the deposit as paid and move the booking to staff review.

        The payment intent id and amount are recorded as reported; they are
        not checked against Stripe. Confirming again overwrites them.
        """
        appointment = self.repo.update(
            appointment_id,
            depositPaid=True,
            paymentStatus=PaymentStatus.DEPOSIT_PAID.value,
            paymentIntentId=data.paymentIntentId,
            depositAmount=data.depositAmount,
            status=AppointmentStatus.PENDING.value,
            paidAt=utcnow(),
        )
        if not appointment:
            raise NotFound("Appointment not found")

        logger.info(
            f"💳 Deposit recorded for appointment {appointment_id}: "
            f"amount={data.depositAmount}, payment_intent={data.paymentIntentId}"
        )
        return appointment

    def delete_appointment(self, appointment_id: int) -> dict:
        """Remove an appointment; any linked payment intent is left untouched"""
        if not self.repo.delete(appointment_id):
            raise NotFound("Appointment not found")
        logger.info(f"🗑️ Appointment {appointment_id} deleted")
        return {"success": True}
