from harmonic.repositories.class_repository import ClassRepository
from harmonic.repositories.enrollment_repository import EnrollmentRepository
from harmonic.repositories.selection_repository import SelectionRepository
from harmonic.repositories.user_repository import UserRepository

__all__ = [
    "ClassRepository",
    "EnrollmentRepository",
    "SelectionRepository",
    "UserRepository",
]
