import pytest

from school_results import create_app
from school_results.config import TestingConfig


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def roster():
    return [
        {"studentId": "S001", "fullName": "Abebe Kebede", "section": "A"},
        {"studentId": "S002", "fullName": "Bob Smith", "section": "A"},
        {"studentId": "S003", "fullName": "Clara Brown", "section": "B"},
    ]


@pytest.fixture
def period1_entries():
    return [
        {"studentId": "S001", "subject": "Math", "date": "2025-08-01", "score": 90},
        {"studentId": "S001", "subject": "Math", "date": "2025-08-02", "score": 100},
        {"studentId": "S001", "subject": "Science", "date": "2025-08-01", "score": 80},
        {"studentId": "S002", "subject": "Math", "date": "2025-08-01", "score": 70},
        {"studentId": "S002", "subject": "Science", "date": "2025-08-01", "score": 70},
    ]
