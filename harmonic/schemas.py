"""Request and response bodies.

Attributes are snake_case in Python and camelCase on the wire, so a body like
``{"instructorEmail": "a@x.com"}`` populates ``instructor_email``. Input models
reject unknown fields so a malformed body fails with 422 before any query runs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

Role = Literal["student", "instructor", "admin"]
ClassStatus = Literal["pending", "approved", "denied"]


def _normalize_email(value: str) -> str:
    normalized = value.strip().lower()
    if not normalized or "@" not in normalized:
        raise ValueError("A valid email is required.")
    return normalized


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class InputModel(CamelModel):
    class Config:
        extra = "forbid"


class TokenRequest(CamelModel):
    email: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class TokenResponse(CamelModel):
    token: str


class PaymentIntentRequest(CamelModel):
    paying_amount: Decimal = Field(..., ge=0)

    @field_validator("paying_amount", mode="before")
    @classmethod
    def parse_amount(cls, value):
        # Go through str so a JSON float like 19.99 is not read as 19.989999...
        if isinstance(value, float):
            return str(value)
        return value


class PaymentIntentResponse(CamelModel):
    client_secret: str


class UserUpsert(InputModel):
    email: str | None = None
    name: str | None = None
    photo_url: str | None = None
    role: Role | None = None
    phone: str | None = None
    address: str | None = None
    gender: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return _normalize_email(value)


class UserResponse(CamelModel):
    id: int
    email: str
    name: str | None = None
    photo_url: str | None = None
    role: str | None = None
    phone: str | None = None
    address: str | None = None
    gender: str | None = None


class ClassCreate(InputModel):
    name: str = Field(..., min_length=1)
    image: str | None = None
    description: str | None = None
    instructor_name: str | None = None
    instructor_email: str
    available_seats: int = Field(0, ge=0)
    price: Decimal = Field(0, ge=0)
    status: Literal["pending"] = "pending"
    enrolled_student_count: int = Field(0, ge=0)

    @field_validator("instructor_email")
    @classmethod
    def validate_instructor_email(cls, value: str) -> str:
        return _normalize_email(value)


class ClassUpdate(InputModel):
    name: str | None = Field(None, min_length=1)
    image: str | None = None
    description: str | None = None
    instructor_name: str | None = None
    available_seats: int | None = Field(None, ge=0)
    price: Decimal | None = Field(None, ge=0)
    status: ClassStatus | None = None
    enrolled_student_count: int | None = Field(None, ge=0)
    feedback: str | None = None


class ClassResponse(CamelModel):
    id: int
    name: str
    image: str | None = None
    description: str | None = None
    instructor_name: str | None = None
    instructor_email: str
    available_seats: int
    price: float
    status: str
    enrolled_student_count: int
    feedback: str | None = None


class SelectionCreate(InputModel):
    student_email: str
    class_id: int
    class_name: str | None = None
    image: str | None = None
    instructor_name: str | None = None
    price: Decimal | None = Field(None, ge=0)

    @field_validator("student_email")
    @classmethod
    def validate_student_email(cls, value: str) -> str:
        return _normalize_email(value)


class SelectionResponse(CamelModel):
    id: int
    student_email: str
    class_id: int
    class_name: str | None = None
    image: str | None = None
    instructor_name: str | None = None
    price: float | None = None


class EnrollmentCreate(InputModel):
    student_email: str
    class_id: int
    class_name: str | None = None
    price: Decimal | None = Field(None, ge=0)
    transaction_id: str | None = None
    date: datetime | None = None
    selection_id: int | None = None

    @field_validator("student_email")
    @classmethod
    def validate_student_email(cls, value: str) -> str:
        return _normalize_email(value)


class EnrollmentResponse(CamelModel):
    id: int
    student_email: str
    class_id: int
    class_name: str | None = None
    price: float | None = None
    transaction_id: str | None = None
    date: datetime


class DeleteResult(CamelModel):
    deleted_count: int
