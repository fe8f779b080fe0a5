"""User model definitions."""

from sqlalchemy import Column, Integer, String
from harmonic.database import Base


class User(Base):
    """Represents a marketplace user, keyed by email."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String)
    photo_url = Column(String)
    role = Column(String, default="student", index=True)  # student/instructor/admin
    phone = Column(String)
    address = Column(String)
    gender = Column(String)
