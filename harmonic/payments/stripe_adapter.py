import logging
from decimal import ROUND_DOWN, Decimal

import stripe

from harmonic.core import config

logger = logging.getLogger(__name__)


class PaymentError(Exception):
    """Raised when the payment processor rejects or fails a call."""


def to_smallest_unit(amount: Decimal) -> int:
    """Convert a decimal currency amount to cents, dropping any fraction of a cent."""
    return int((Decimal(amount) * 100).to_integral_value(rounding=ROUND_DOWN))


class PaymentIntentAdapter:
    def __init__(self, secret_key: str | None = None, currency: str | None = None):
        self.secret_key = secret_key if secret_key is not None else config.STRIPE_SECRET_KEY
        self.currency = currency or config.PAYMENT_CURRENCY

    def create_intent(self, amount: int) -> str:
        try:
            intent = stripe.PaymentIntent.create(
                api_key=self.secret_key,
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
            )
        except stripe.StripeError as exc:
            logger.exception("Payment intent creation for %s %s failed", amount, self.currency)
            raise PaymentError("Payment processor error.") from exc
        return intent.client_secret
