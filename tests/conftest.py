# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Environment is set before the app is imported. No database is needed: the
# `fake_db` fixture swaps the query helpers in `core.db` for a recorder that
# returns scripted rows.
# =============================================================================

import os
import uuid
from contextlib import asynccontextmanager

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("JWT_ALG", "HS256")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import jwt
import pytest
from fastapi.testclient import TestClient

from core import db
from main import app

USER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_USER_ID = "22222222-2222-2222-2222-222222222222"


def make_token(sub=USER_ID, **claims):
    payload = {
        "sub": sub,
        "email": "manager@elevare.test",
        "firstName": "Asha",
        "lastName": "Rao",
        "roles": ["manager"],
        "type": "access",
    }
    payload.update(claims)
    return jwt.encode(payload, os.environ["JWT_SECRET"], algorithm=os.environ["JWT_ALG"])


class FakeDB:
    """
    Stand-in for the `core.db` helpers.

    Results are served by the first matching `on(fragment, result)` rule, then
    from the `one` / `all` queues in call order. Every call is recorded in
    `calls` as (method, sql, args).
    """

    def __init__(self):
        self.calls = []
        self.rules = []
        self.one = []
        self.all = []
        self.transactions = 0
        self.rollbacks = 0
        self.error = None

    def on(self, fragment, result):
        self.rules.append((fragment, result))
        return self

    def _lookup(self, sql, queue, default):
        if self.error is not None:
            raise self.error
        for fragment, result in self.rules:
            if fragment in sql:
                return result
        return queue.pop(0) if queue else default

    async def fetch_one(self, sql, *args):
        self.calls.append(("fetch_one", sql, args))
        return self._lookup(sql, self.one, None)

    async def fetch_all(self, sql, *args):
        self.calls.append(("fetch_all", sql, args))
        return self._lookup(sql, self.all, [])

    async def execute(self, sql, *args):
        self.calls.append(("execute", sql, args))
        if self.error is not None:
            raise self.error

    async def fetch_one_in(self, conn, sql, *args):
        return await self.fetch_one(sql, *args)

    async def execute_in(self, conn, sql, *args):
        await self.execute(sql, *args)

    @asynccontextmanager
    async def transaction(self):
        self.transactions += 1
        try:
            yield object()
        except Exception:
            self.rollbacks += 1
            raise

    def sql_for(self, method):
        return [sql for name, sql, _ in self.calls if name == method]

    def args_for(self, fragment):
        for _, sql, args in self.calls:
            if fragment in sql:
                return args
        raise AssertionError(f"no query containing {fragment!r}")


@pytest.fixture
def fake_db(monkeypatch):
    fake = FakeDB()
    for name in ("fetch_one", "fetch_all", "execute", "fetch_one_in", "execute_in", "transaction"):
        monkeypatch.setattr(db, name, getattr(fake, name))
    return fake


@pytest.fixture
def client():
    # Not entered as a context manager, so the lifespan (and the pool) never starts.
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def token_factory():
    return make_token


@pytest.fixture
def new_id():
    return lambda: str(uuid.uuid4())
