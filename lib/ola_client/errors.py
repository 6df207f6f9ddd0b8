from __future__ import annotations

import json
from typing import Any


class OlaClientError(Exception):
    """Base client error."""


class MissingCredentialError(OlaClientError):
    """No access token configured; raised before any network I/O."""


class SandboxRequiredError(OlaClientError):
    """Sandbox-only operation attempted with a production client."""


class UnsupportedVerbError(OlaClientError, ValueError):
    """HTTP verb outside GET/POST/PUT/PATCH/DELETE."""


def _decode_details(details: str | None) -> Any:
    if not details:
        return None
    try:
        return json.loads(details)
    except ValueError:
        return None


class ApiError(OlaClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details

    @property
    def reason_phrase(self) -> str:
        return self.message

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    @property
    def body(self) -> Any:
        """Error response body decoded as JSON, ``None`` when it is not JSON."""
        return _decode_details(self.details)


class AuthError(ApiError):
    """Auth-related API error."""


class NetworkError(ApiError):
    """Transport/network layer error, no HTTP response was obtained."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(500, message, details)
