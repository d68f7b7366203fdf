"""
Appointment status vocabulary and transitions.

Lifecycle: pending_payment → pending (deposit paid) → confirmed → completed,
with cancellation possible from any non-terminal state.

Staff status updates are free-form unless STRICT_APPOINTMENT_STATUS is on;
the transition table below is enforced only in strict mode.
"""

from enum import Enum


class AppointmentStatus(str, Enum):
    PENDING_PAYMENT = "pending_payment"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    UNPAID = "unpaid"
    DEPOSIT_PAID = "deposit_paid"


ALLOWED_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.PENDING_PAYMENT: frozenset(
        {AppointmentStatus.PENDING, AppointmentStatus.CANCELLED}
    ),
    AppointmentStatus.PENDING: frozenset(
        {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}
    ),
    AppointmentStatus.CONFIRMED: frozenset(
        {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}
    ),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
}


def is_known_status(value: str) -> bool:
    return value in {s.value for s in AppointmentStatus}


def can_transition(current: str, target: str) -> bool:
    """
    Check a status change against the transition table.

    Setting the current status again is always allowed. Unknown statuses
    (set while strict mode was off) can move to any known status.
    """
    if current == target:
        return True
    if not is_known_status(target):
        return False
    if not is_known_status(current):
        return True
    return AppointmentStatus(target) in ALLOWED_TRANSITIONS[AppointmentStatus(current)]
