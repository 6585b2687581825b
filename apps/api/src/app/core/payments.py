"""
Payment Gateway

Razorpay order creation. Payment confirmations are verified locally,
see app.core.security.
"""

import asyncio
import logging
from typing import Any

import razorpay

from app.core.config import settings

logger = logging.getLogger(__name__)


class PaymentGateway:
    """Thin async wrapper around the Razorpay SDK client."""

    def __init__(self, key_id: str, key_secret: str) -> None:
        self._client = razorpay.Client(auth=(key_id, key_secret))

    async def create_order(self, amount: int, currency: str, receipt: str) -> dict[str, Any]:
        """
        Create a payment order.

        Args:
            amount: Amount in minor units (paise for INR)
            currency: ISO currency code
            receipt: Merchant receipt reference

        Returns:
            The order as returned by the gateway (id, amount, currency, receipt, ...)
        """
        data = {"amount": amount, "currency": currency, "receipt": receipt}
        # Run sync Razorpay call in thread pool to avoid blocking event loop
        order = await asyncio.to_thread(self._client.order.create, data=data)
        logger.info(f"Payment order created: id={order.get('id')}, receipt={receipt}")
        return order


# Process-wide gateway instance
payment_gateway: PaymentGateway | None = None


def init_payment_gateway() -> PaymentGateway:
    """
    Create the payment gateway client.

    Call this on application startup.
    """
    global payment_gateway

    if not settings.razorpay_key_id or not settings.razorpay_secret:
        logger.warning("RAZORPAY_KEY_ID / RAZORPAY_SECRET not set - order creation will fail")

    payment_gateway = PaymentGateway(settings.razorpay_key_id, settings.razorpay_secret)
    return payment_gateway


async def get_payment_gateway() -> PaymentGateway:
    """Get the payment gateway instance (FastAPI dependency)."""
    if payment_gateway is None:
        raise RuntimeError("Payment gateway is not initialized")
    return payment_gateway


def close_payment_gateway() -> None:
    """Drop the payment gateway instance."""
    global payment_gateway
    payment_gateway = None
