import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')
os.environ.setdefault('JWT_SECRET_KEY', 'harmonic-test-secret-0123456789abcdef')

from harmonic.auth.jwt_handler import create_access_token  # noqa: E402
from harmonic.database import Database  # noqa: E402
from harmonic.main import create_app  # noqa: E402


class FakePayments:
    def __init__(self):
        self.amounts: list[int] = []

    def create_intent(self, amount: int) -> str:
        self.amounts.append(amount)
        return f'pi_test_secret_{amount}'


@pytest.fixture
def database():
    db = Database('sqlite:///:memory:')
    db.init_schema()
    try:
        yield db
    finally:
        db.drop_schema()
        db.dispose()


@pytest.fixture
def session(database):
    db = database.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def payments() -> FakePayments:
    return FakePayments()


@pytest.fixture
def client(database, payments) -> TestClient:
    return TestClient(create_app(database=database, payments=payments))


@pytest.fixture
def auth_headers():
    def build(email: str) -> dict[str, str]:
        return {'Authorization': f'Bearer {create_access_token(email)}'}

    return build


@pytest.fixture
def seed(session):
    def add(*records):
        session.add_all(records)
        session.commit()
        for record in records:
            session.refresh(record)
        return records

    return add
