"""Pytest fixtures for onefichier tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
from helpers import RequestRecorder

from onefichier import FichierClient

API_KEY = "test_api_key"


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RequestRecorder:
    """Route every httpx.AsyncClient through a recording mock transport."""
    rec = RequestRecorder()
    real_async_client = httpx.AsyncClient

    def factory(*args: Any, **kwargs: Any) -> httpx.AsyncClient:
        kwargs["transport"] = httpx.MockTransport(rec.handler)
        return real_async_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", factory)
    return rec


@pytest.fixture
async def client(recorder: RequestRecorder) -> AsyncIterator[FichierClient]:
    """Create a client wired to the recorder."""
    async with FichierClient(API_KEY) as fichier_client:
        yield fichier_client
