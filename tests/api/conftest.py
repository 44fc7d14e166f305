"""Fixtures for API tests."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI

from ledgerdesk.api.main import app as ledger_app


@pytest.fixture
def app() -> Iterator[FastAPI]:
    yield ledger_app
    ledger_app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-User-ID": "user-1"}
