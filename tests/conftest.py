import os
from collections import defaultdict

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from loguru import logger

# ------------------------------------------------------------------
# FAKE SERVICE ACCOUNT
# Must be set BEFORE importing app.main: settings are parsed at import.
# ------------------------------------------------------------------
os.environ["FIREBASE_SERVICE_ACCOUNT"] = (
    '{"type": "service_account", "project_id": "parent-portal-test"}'
)

from app.main import app
from app.api.deps import get_db


# ------------------------------------------------------------------
# In-memory stand-in for the Firestore AsyncClient
# ------------------------------------------------------------------
class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    def to_dict(self):
        return dict(self._data)


class FakeQuery:
    def __init__(self, db, docs):
        self._db = db
        self._docs = docs

    def where(self, *, filter):
        self._db.filters.append((filter.field_path, filter.op_string, filter.value))
        assert filter.op_string == "=="
        matches = [d for d in self._docs if d.to_dict().get(filter.field_path) == filter.value]
        return FakeQuery(self._db, matches)

    def limit(self, count):
        return FakeQuery(self._db, self._docs[:count])

    async def get(self):
        if self._db.error:
            raise self._db.error
        return list(self._docs)


class FakeFirestore:
    def __init__(self):
        self.docs = defaultdict(list)
        self.collections_used = []
        self.filters = []
        self.error = None

    def add(self, collection, doc_id, data):
        self.docs[collection].append(FakeSnapshot(doc_id, data))

    def collection(self, name):
        self.collections_used.append(name)
        return FakeQuery(self, self.docs[name])


@pytest.fixture
def fake_db():
    db = FakeFirestore()
    db.add("students", "doc42", {
        "student_id": "XY9",
        "contact": "0171234567",
        "guardianContact": "0179999999",
    })
    return db


@pytest_asyncio.fixture
async def client(fake_db):
    """
    Uses ASGITransport() with the Firestore dependency swapped for the fake.
    """
    app.dependency_overrides[get_db] = lambda: fake_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def raw_client():
    """Client without dependency overrides (real get_db)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def error_logs():
    messages = []
    handler_id = logger.add(messages.append, level="ERROR")
    yield messages
    logger.remove(handler_id)
