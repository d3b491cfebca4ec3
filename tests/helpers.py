"""Shared test helpers for onefichier tests."""

from __future__ import annotations

import json
from typing import Any

import httpx


class RequestRecorder:
    """Records requests sent through an httpx.MockTransport.

    Queued responses are returned in order; once the queue is empty every
    request is answered with ``{"status": "OK"}``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def queue(self, *responses: httpx.Response | Exception) -> None:
        self._responses.extend(responses)

    def queue_json(self, body: Any, status_code: int = 200) -> None:
        self.queue(httpx.Response(status_code, json=body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={"status": "OK"})
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_body(request: httpx.Request) -> Any:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)
