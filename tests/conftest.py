"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory stores that satisfy the store protocols, a controllable clock and
an app wired to both through the service container.
"""

import os

# Cheap bcrypt and a known secret before any settings are read
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-testing-only")

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, reset_container, set_container
from modules.auth.exceptions import EmailAlreadyExistsError
from modules.auth.models import UserRecord
from modules.messages.exceptions import MessageNotFoundError
from modules.messages.models import Message, Reply
from shared.config import get_settings


TEST_JWT_SECRET = "test-secret-key-for-testing-only"
API_PREFIX = "/api/v1"


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now: Optional[datetime] = None):
        self.now = now or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class _Sequence:
    """Strictly increasing timestamps so ordering is deterministic."""

    def __init__(self):
        self._base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        self._count = 0

    def next(self) -> datetime:
        self._count += 1
        return self._base + timedelta(seconds=self._count)


class InMemoryIdentityStore:
    """IIdentityStore fake with the same unique-email behavior as the table."""

    def __init__(self):
        self.users: dict[str, UserRecord] = {}
        self._times = _Sequence()

    def insert_user(self, email: str, password_hash: str) -> UserRecord:
        if email in self.users:
            raise EmailAlreadyExistsError()
        now = self._times.next()
        user = UserRecord(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.users[email] = user
        return user

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        return self.users.get(email)


class InMemoryContentStore:
    """IContentStore fake that enforces the replies -> messages reference."""

    def __init__(self):
        self.messages: dict[str, Message] = {}
        self.replies: list[Reply] = []
        self._times = _Sequence()

    def insert_message(self, owner_id, content, media_urls) -> Message:
        now = self._times.next()
        message = Message(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            content=content,
            media_urls=media_urls,
            created_at=now,
            updated_at=now,
        )
        self.messages[message.id] = message
        return message

    def get_message(self, message_id) -> Optional[Message]:
        return self.messages.get(message_id)

    def list_messages(self, limit) -> list[Message]:
        ordered = sorted(self.messages.values(), key=lambda m: m.created_at, reverse=True)
        return ordered[:limit]

    def insert_reply(self, parent_message_id, owner_id, content, media_urls) -> Reply:
        if parent_message_id not in self.messages:
            raise MessageNotFoundError(parent_message_id)
        now = self._times.next()
        reply = Reply(
            id=str(uuid.uuid4()),
            parent_message_id=parent_message_id,
            owner_id=owner_id,
            content=content,
            media_urls=media_urls,
            created_at=now,
            updated_at=now,
        )
        self.replies.append(reply)
        return reply

    def list_replies(self, parent_message_id) -> list[Reply]:
        replies = [r for r in self.replies if r.parent_message_id == parent_message_id]
        return sorted(replies, key=lambda r: r.created_at)


class InMemoryBlobStore:
    """IBlobStore fake that keeps uploads in a dict."""

    def __init__(self):
        self.objects: dict[str, tuple[bytes, str]] = {}

    def put_object(self, name: str, data: bytes, content_type: str) -> str:
        self.objects[name] = (data, content_type)
        return f"http://blobs.test/threadline-media/{name}"


@pytest.fixture(autouse=True)
def reset_services():
    """Reset the service container before and after each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def identity_store() -> InMemoryIdentityStore:
    return InMemoryIdentityStore()


@pytest.fixture
def content_store() -> InMemoryContentStore:
    return InMemoryContentStore()


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def container(identity_store, content_store, blob_store, clock) -> ServiceContainer:
    """Service container backed by the in-memory stores."""
    container = ServiceContainer(
        identity_store=identity_store,
        content_store=content_store,
        blob_store=blob_store,
        jwt_secret=TEST_JWT_SECRET,
        clock=clock,
    )
    set_container(container)
    return container


@pytest.fixture
def app(container):
    """Create a fresh app for each test."""
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def signed_up(client) -> dict:
    """Sign up a default user and return the response body."""
    response = client.post(
        f"{API_PREFIX}/signup",
        json={"email": "a@x.com", "password": "password123"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(signed_up) -> dict[str, str]:
    """Authorization headers for the default user."""
    return {"Authorization": f"Bearer {signed_up['token']}"}
