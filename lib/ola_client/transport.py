from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import ApiError, AuthError, NetworkError
from .request import RequestDescriptor

logger = logging.getLogger(__name__)

USER_AGENT = "ola-client/0.1.0"
DEFAULT_TIMEOUT_S = 15.0
MAX_DETAILS = 1000


class Transport:
    """Executes request descriptors over an ``httpx.Client``.

    Only 4xx/5xx responses surface as ``httpx.HTTPStatusError`` (with the
    response attached) and network failures as ``httpx.RequestError``;
    turning those into ``ApiError`` is left to ``translate_error``.
    """

    def __init__(self, http_client: httpx.Client | None = None, *, timeout_s: float = DEFAULT_TIMEOUT_S):
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=timeout_s,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
        )

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def send(self, request: RequestDescriptor) -> httpx.Response:
        headers = {k: v for k, v in request.headers.items() if v is not None}
        r = self._client.request(
            request.verb.value,
            request.url,
            headers=headers,
            params=request.query,
            json=request.json_body,
        )
        if r.is_error:
            r.raise_for_status()
        return r


def handle_response(response: httpx.Response) -> Any:
    """Decode a successful response body as JSON (``None`` when empty)."""
    if not response.content.strip():
        return None
    try:
        return response.json()
    except ValueError as e:
        raise ApiError(response.status_code, "Invalid JSON response", response.text[:MAX_DETAILS]) from e


def translate_error(exc: httpx.HTTPError) -> ApiError:
    if isinstance(exc, httpx.HTTPStatusError):
        r = exc.response
        message = r.reason_phrase or f"HTTP {r.status_code}"
        details = r.text[:MAX_DETAILS] or None
        if r.status_code in (401, 403):
            error: ApiError = AuthError(r.status_code, message, details)
        else:
            error = ApiError(r.status_code, message, details)
    else:
        # no response was obtained; 500 stands in for the missing status
        error = NetworkError(str(exc) or type(exc).__name__)
    error.__cause__ = exc
    return error
