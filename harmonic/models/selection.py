"""Cart selection model definitions."""

from sqlalchemy import Column, Integer, Numeric, String
from harmonic.database import Base


class Selection(Base):
    """A class a student added to their cart."""
    __tablename__ = "selections"

    id = Column(Integer, primary_key=True, index=True)
    student_email = Column(String, index=True, nullable=False)
    class_id = Column(Integer, index=True, nullable=False)
    class_name = Column(String)
    image = Column(String)
    instructor_name = Column(String)
    price = Column(Numeric(10, 2))
