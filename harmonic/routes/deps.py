from fastapi import Depends, Request
from sqlalchemy.orm import Session

from harmonic.payments.stripe_adapter import PaymentIntentAdapter
from harmonic.repositories import ClassRepository, EnrollmentRepository, SelectionRepository, UserRepository


def get_db(request: Request):
    yield from request.app.state.database.session()


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_class_repository(db: Session = Depends(get_db)) -> ClassRepository:
    return ClassRepository(db)


def get_selection_repository(db: Session = Depends(get_db)) -> SelectionRepository:
    return SelectionRepository(db)


def get_enrollment_repository(db: Session = Depends(get_db)) -> EnrollmentRepository:
    return EnrollmentRepository(db)


def get_payments(request: Request) -> PaymentIntentAdapter:
    return request.app.state.payments
