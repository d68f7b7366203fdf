"""Stripe service - payment intents and webhook verification"""

import asyncio
import logging
from decimal import ROUND_HALF_UP, Decimal
from functools import partial
from typing import Optional

import stripe

from ...config import PAYMENT_TIMEOUT_SECONDS, STRIPE_SECRET_KEY, STRIPE_WEBHOOK_SECRET
from ...errors import PaymentGatewayError, WebhookVerificationError

logger = logging.getLogger(__name__)


def to_minor_units(amount: float) -> int:
    """Convert a decimal currency amount to cents, rounding half up"""
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class StripePaymentsService:
    """Thin pass-through to the Stripe API"""

    def __init__(
        self,
        api_key: Optional[str] = STRIPE_SECRET_KEY,
        webhook_secret: Optional[str] = STRIPE_WEBHOOK_SECRET,
        timeout: float = PAYMENT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.webhook_secret = webhook_secret
        self.timeout = timeout

        if not self.api_key:
            logger.warning(
                "STRIPE_SECRET_KEY not set; payment intent creation will fail until configured"
            )
        if not self.webhook_secret:
            logger.warning("STRIPE_WEBHOOK_SECRET not set; webhooks will be rejected")

    def is_available(self) -> bool:
        """Check if Stripe is configured"""
        return bool(self.api_key)

    async def create_payment_intent(self, amount: float, currency: str, user_id: int) -> str:
        """
        Create a payment intent for the given amount and return its client secret.

        Raises:
            PaymentGatewayError: Stripe not configured, Stripe rejected the
                request, or no answer within ``timeout`` seconds
        """
        if not self.is_available():
            raise PaymentGatewayError(details="Payments are not configured")

        amount_cents = to_minor_units(amount)
        try:
            loop = asyncio.get_running_loop()
            intent = await asyncio.wait_for(
                loop.run_in_executor(
                    None,
                    partial(
                        stripe.PaymentIntent.create,
                        api_key=self.api_key,
                        amount=amount_cents,
                        currency=currency,
                        metadata={"userId": str(user_id)},
                        automatic_payment_methods={"enabled": True},
                    ),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"❌ Stripe did not respond within {self.timeout}s for user {user_id}")
            raise PaymentGatewayError(details="Payment processor timed out") from e
        except stripe.StripeError as e:
            logger.error(f"❌ Stripe API error while creating payment intent: {e}")
            raise PaymentGatewayError(details=getattr(e, "user_message", None) or str(e)) from e

        logger.info(
            f"💳 Payment intent {intent.id} created for user {user_id}: {amount_cents} {currency}"
        )
        return intent.client_secret

    def construct_event(self, payload: bytes, signature: Optional[str]) -> stripe.Event:
        """
        Verify a webhook's signature and parse it into an event.

        Raises:
            WebhookVerificationError: missing secret or header, bad signature,
                or a payload that is not a valid event
        """
        if not self.webhook_secret:
            raise WebhookVerificationError("Webhook Error: webhook secret not configured")
        if not signature:
            raise WebhookVerificationError("Webhook Error: missing Stripe-Signature header")

        try:
            return stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        except ValueError as e:
            logger.warning("🚫 Invalid Stripe webhook payload")
            raise WebhookVerificationError(f"Webhook Error: {e}") from e
        except stripe.SignatureVerificationError as e:
            logger.warning("🚫 Invalid Stripe webhook signature")
            raise WebhookVerificationError(f"Webhook Error: {e}") from e
