import asyncio
import os

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

os.environ.setdefault('ACCESS_TOKEN_SECRET', 'test-secret')

from academy import app  # noqa: E402
from academy.core.dependencies import get_db  # noqa: E402
from academy.core.security import create_access_token  # noqa: E402


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def db():
    return AsyncMongoMockClient()['languageAcademyTest']


@pytest.fixture
def client(db):
    async def override_get_db():
        return db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def auth_header(email: str) -> dict:
    return {'Authorization': f'Bearer {create_access_token(email)}'}


@pytest.fixture
def add_user(db):
    def _add_user(email: str, role: str | None = None) -> str:
        doc = {'email': email, 'name': email.split('@')[0]}
        if role:
            doc['role'] = role
        return str(run(db['users'].insert_one(doc)).inserted_id)
    return _add_user


@pytest.fixture
def add_course(db):
    def _add_course(status: str = 'approved', available_seats: int = 10, **fields) -> str:
        doc = {
            'name': 'Spanish for Beginners',
            'instructorEmail': 'instructor@academy.com',
            'price': 49.99,
            'availableSeats': available_seats,
            'enrolled': 0,
            'status': status,
        }
        doc.update(fields)
        return str(run(db['courses'].insert_one(doc)).inserted_id)
    return _add_course
