"""Payments router - Stripe payment intents and webhooks"""

import logging

from fastapi import APIRouter, Depends, Request

from ...auth import get_current_user_id
from ...schemas import ReceivedResponse
from .schemas import PaymentIntentRequest, PaymentIntentResponse
from .stripe_service import StripePaymentsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Payments"])


def get_payments_service(request: Request) -> StripePaymentsService:
    """Dependency injection for StripePaymentsService"""
    return request.app.state.payments


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    data: PaymentIntentRequest,
    user_id: int = Depends(get_current_user_id),
    service: StripePaymentsService = Depends(get_payments_service),
):
    client_secret = await service.create_payment_intent(data.amount, data.currency.lower(), user_id)
    return PaymentIntentResponse(clientSecret=client_secret)


@router.post("/stripe-webhook", response_model=ReceivedResponse)
async def stripe_webhook(
    request: Request,
    service: StripePaymentsService = Depends(get_payments_service),
):
    """Stripe webhook endpoint; the raw body is needed for signature verification"""
    payload = await request.body()
    event = service.construct_event(payload, request.headers.get("stripe-signature"))

    logger.info(f"📥 Stripe webhook received: id={event.id}, type={event.type}")

    if event.type == "payment_intent.succeeded":
        # Orders and appointments are confirmed by the frontend, not here
        logger.info(f"✅ Payment intent succeeded: {event.data.object.id}")

    return ReceivedResponse()
