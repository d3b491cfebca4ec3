"""Exception hierarchy for the onefichier library."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class FichierError(Exception):
    """Base exception for all onefichier errors."""

    pass


class ConfigurationError(FichierError):
    """Raised when the client cannot be configured (e.g. no API key)."""

    pass


class ApiStatusError(FichierError):
    """Raised when a response envelope reports a non-OK status.

    The client never raises this on its own; see ensure_ok().
    """

    def __init__(self, status: str, message: str) -> None:
        super().__init__(f"{status}: {message}" if message else status)
        self.status = status
        self.message = message


def ensure_ok(body: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return body unchanged, or raise ApiStatusError if its status is not OK.

    Bodies without a status field (upload results, remote upload info) pass.
    """
    status = body.get("status")
    if status is not None and status != "OK":
        raise ApiStatusError(str(status), str(body.get("message") or ""))
    return body
