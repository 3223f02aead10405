"""
Pytest configuration and fixtures for Pledge API tests.
"""
import os

# The app's own engine is only touched by the startup hook
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pledge_api.config import Settings, get_settings
from pledge_api.database import Base, get_db
from pledge_api.errors import SendError
from pledge_api.limiter import limiter
from pledge_api.mailer import get_mailer
from pledge_api.main import app
from pledge_api.models import Campaign, CampaignStatus, Pledge

# Disable rate limiting for tests
limiter.enabled = False

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Global session for sharing across requests
_test_session = None


def get_test_db():
    """Get the shared test database session."""
    yield _test_session


class FakeMailer:
    """Records sends instead of calling Resend. Addresses in fail_on raise SendError."""

    def __init__(self):
        self.sent = []
        self.fail_on = set()

    def send(self, sender, to, subject, html):
        if to in self.fail_on:
            raise SendError(f"Resend error for {to}: mailbox unavailable", recipient=to)
        self.sent.append({"from": sender, "to": to, "subject": subject, "html": html})
        return f"msg_{len(self.sent)}"

    @property
    def recipients(self):
        return [m["to"] for m in self.sent]


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    global _test_session

    Base.metadata.create_all(bind=engine)
    _test_session = TestingSessionLocal()
    app.dependency_overrides[get_db] = get_test_db

    yield _test_session

    app.dependency_overrides.pop(get_db, None)
    _test_session.close()
    _test_session = None

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def settings():
    """Settings with no trigger secret and a fixed site URL."""
    test_settings = Settings(
        _env_file=None,
        cron_secret=None,
        resend_api_key="re_test",
        base_url="https://pledge.example.org",
        email_from="Pledges <begin@pledge.example.org>",
    )
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield test_settings
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture(scope="function")
def mailer():
    """Fake email client wired into the app."""
    fake = FakeMailer()
    app.dependency_overrides[get_mailer] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_mailer, None)


@pytest.fixture(scope="function")
def client(db, settings, mailer):
    """Create a test client."""
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def make_campaign(db):
    """Factory for campaign rows."""
    def _make(campaign="pilot_v1", threshold=2, status=CampaignStatus.COLLECTING.value, **fields):
        row = Campaign(campaign=campaign, threshold=threshold, status=status, **fields)
        db.add(row)
        db.commit()
        return row
    return _make


@pytest.fixture(scope="function")
def add_pledges(db):
    """Factory adding one pledge per email (None for a pledge without an address)."""
    def _add(campaign, emails, notified_at=None):
        rows = [
            Pledge(campaign=campaign, name=f"Pledger {i}", email=email, notified_at=notified_at)
            for i, email in enumerate(emails)
        ]
        db.add_all(rows)
        db.commit()
        return [row.id for row in rows]
    return _add
