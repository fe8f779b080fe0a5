from harmonic.models.course_class import CourseClass
from harmonic.repositories.base_repository import BaseRepository

POPULAR_CLASS_LIMIT = 6


class ClassRepository(BaseRepository[CourseClass]):
    MODEL = CourseClass

    def find_approved(self) -> list[CourseClass]:
        return self.find_all(status="approved")

    def find_by_instructor(self, instructor_email: str) -> list[CourseClass]:
        return self.find_all(instructor_email=instructor_email)

    def find_popular(self) -> list[CourseClass]:
        """Top classes by enrolled students; ties keep the database's order."""
        query = self._db.query(CourseClass).order_by(CourseClass.enrolled_student_count.desc())
        return self._all(query.limit(POPULAR_CLASS_LIMIT), "find_popular")
