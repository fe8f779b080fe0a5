"""Class listing model definitions."""

from sqlalchemy import Column, Integer, Numeric, String, Text
from harmonic.database import Base


class CourseClass(Base):
    """Represents a class offered by an instructor."""
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    image = Column(String)
    description = Column(Text)
    instructor_name = Column(String)
    instructor_email = Column(String, index=True, nullable=False)
    available_seats = Column(Integer, default=0, nullable=False)
    price = Column(Numeric(10, 2), default=0, nullable=False)
    status = Column(String, default="pending", index=True, nullable=False)
    enrolled_student_count = Column(Integer, default=0, nullable=False)
    feedback = Column(Text)
