from harmonic.models.user import User
from harmonic.repositories.base_repository import BaseRepository

TOP_INSTRUCTOR_LIMIT = 6


class UserRepository(BaseRepository[User]):
    MODEL = User

    def upsert_by_email(self, email: str, values: dict) -> User:
        return self.upsert_by_key("email", email, values)

    def find_by_email(self, email: str) -> User | None:
        return self.find_one(email=email)

    def find_by_role(self, role: str, limit: int | None = None) -> list[User]:
        query = self._query(role=role).order_by(User.id)
        if limit is not None:
            query = query.limit(limit)
        return self._all(query, "find_by_role")

    def top_instructors(self) -> list[User]:
        return self.find_by_role("instructor", limit=TOP_INSTRUCTOR_LIMIT)
