from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from harmonic.models.course_class import CourseClass
from harmonic.models.enrollment import EnrolledClass
from harmonic.models.selection import Selection
from harmonic.repositories.base_repository import BaseRepository


class EnrollmentRepository(BaseRepository[EnrolledClass]):
    MODEL = EnrolledClass

    def find_by_student(self, student_email: str) -> list[EnrolledClass]:
        query = self._query(student_email=student_email).order_by(EnrolledClass.date.desc())
        return self._all(query, "find_by_student")

    def record_purchase(self, values: dict[str, Any], selection_id: int | None = None) -> EnrolledClass:
        """Insert the enrollment and settle the cart in one transaction.

        When ``selection_id`` is given the matching cart entry of the same
        student is deleted. The purchased class gains one enrolled student and
        loses one available seat (never below zero).
        """
        enrollment = EnrolledClass(**{k: v for k, v in values.items() if v is not None})
        try:
            self._db.add(enrollment)

            if selection_id is not None:
                self._db.query(Selection).filter(
                    Selection.id == selection_id,
                    Selection.student_email == enrollment.student_email,
                ).delete(synchronize_session=False)

            course_class = self._db.get(CourseClass, enrollment.class_id)
            if course_class is not None:
                course_class.enrolled_student_count = (course_class.enrolled_student_count or 0) + 1
                if (course_class.available_seats or 0) > 0:
                    course_class.available_seats -= 1

            self._db.commit()
            self._db.refresh(enrollment)
        except SQLAlchemyError as exc:
            raise self._fail("record_purchase", exc) from exc
        return enrollment
