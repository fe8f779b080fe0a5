from harmonic.models.selection import Selection
from harmonic.repositories.base_repository import BaseRepository


class SelectionRepository(BaseRepository[Selection]):
    MODEL = Selection

    def find_by_student(self, student_email: str) -> list[Selection]:
        return self.find_all(student_email=student_email)
