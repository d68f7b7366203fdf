"""
Error taxonomy for the salon API.

Every failure a handler can detect is raised as a ``SalonAPIError`` subclass
and rendered in one place (see ``main.salon_error_handler``) as
``{"error": ..., "details": ...}`` with the class's HTTP status.
"""

from typing import Any, Optional


class SalonAPIError(Exception):
    """Base class for errors that map directly onto an HTTP response"""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(SalonAPIError):
    status_code = 400
    message = "Invalid request data"


class Unauthenticated(SalonAPIError):
    status_code = 401
    message = "No token"


class InvalidToken(SalonAPIError):
    status_code = 401
    message = "Invalid token"


class NotFound(SalonAPIError):
    status_code = 404
    message = "Not found"


class DuplicateEmail(SalonAPIError):
    status_code = 400
    message = "Email already registered"


class InvalidCredentials(SalonAPIError):
    status_code = 400
    message = "Invalid credentials"


class PaymentGatewayError(SalonAPIError):
    status_code = 500
    message = "Payment error"


class WebhookVerificationError(SalonAPIError):
    """Raised when a webhook signature or payload cannot be verified"""

    status_code = 400
    message = "Webhook Error"
