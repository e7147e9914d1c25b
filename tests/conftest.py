"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- An admin account and a client logged in through the real cookie flow
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.crud import user as user_crud
from main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "S3cure-Passw0rd"
ADMIN_EMAIL = "admin@example.com"

# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    All tables are dropped after the test completes.
    """
    from app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db_session):
    """The single admin account."""
    return user_crud.create_admin(db_session, ADMIN_USERNAME, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def admin_client(client, admin_user):
    """Test client holding a real admin session cookie."""
    response = client.post(
        "/api/auth",
        json={"action": "login", "username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def demo_client(client):
    """Test client logged in as the demo identity."""
    response = client.post("/api/auth", json={"action": "login", "isDemo": True})
    assert response.status_code == 200
    return client


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Bank Clerk Recruitment 2024",
        "department": "State Bank of India",
        "category": "Banking",
        "description": "Recruitment of junior associates (customer support and sales).",
        "qualification": "Graduation in any discipline",
        "vacancies": 8283,
        "postedDate": "2024-11-17",
        "lastDate": "2024-12-07",
        "applyLink": "https://sbi.co.in/careers",
    }


@pytest.fixture
def sample_post_data():
    return {
        "title": "How to prepare for SBI Clerk prelims",
        "category": "Preparation",
        "content": "Start with the previous year papers.",
        "status": "published",
        "type": "posts",
        "publishedDate": "2024-11-20",
    }
