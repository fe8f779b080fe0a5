from fastapi import APIRouter, Depends

from harmonic.payments.stripe_adapter import PaymentIntentAdapter, to_smallest_unit
from harmonic.routes.deps import get_payments
from harmonic.schemas import PaymentIntentRequest, PaymentIntentResponse

router = APIRouter(tags=['payments'])


@router.post('/create-payment-intent', response_model=PaymentIntentResponse)
def create_payment_intent(data: PaymentIntentRequest, payments: PaymentIntentAdapter = Depends(get_payments)):
    amount = to_smallest_unit(data.paying_amount)
    client_secret = payments.create_intent(amount)
    return PaymentIntentResponse(client_secret=client_secret)
