"""Enrollment model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Numeric, String
from harmonic.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EnrolledClass(Base):
    """Purchase record; written once and never modified."""
    __tablename__ = "enrolled_classes"

    id = Column(Integer, primary_key=True, index=True)
    student_email = Column(String, index=True, nullable=False)
    class_id = Column(Integer, index=True, nullable=False)
    class_name = Column(String)
    price = Column(Numeric(10, 2))
    transaction_id = Column(String)
    date = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
