from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

import httpx

from .config_types import ClientConfig, merge_config, resolve_config
from .errors import SandboxRequiredError
from .rate_limit import RateLimit, parse_rate_limit
from .request import HttpVerb, build_request, build_url
from .transport import Transport, handle_response, translate_error

logger = logging.getLogger(__name__)

DEFAULT_SANDBOX_MESSAGE = (
    "Attempted to invoke sandbox functionality with production client; "
    "this is not recommended"
)


class OlaClient:
    def __init__(
            self,
            configuration: Mapping[str, Any] | ClientConfig | None = None,
            *,
            transport: Transport | httpx.Client | None = None,
            **overrides: Any,
    ):
        self._cfg = merge_config(resolve_config(configuration), overrides)
        self._t = _as_transport(transport)
        self._rate_limit: RateLimit | None = None
        self._rate_limit_lock = threading.Lock()

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def rate_limit(self) -> RateLimit | None:
        return self._rate_limit

    @property
    def transport(self) -> Transport:
        return self._t

    def set_transport(self, transport: Transport | httpx.Client) -> OlaClient:
        replacement = _as_transport(transport)
        if replacement is not self._t:
            self._t.close()
        self._t = replacement
        return self

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> OlaClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def url_for(self, path: str) -> str:
        return build_url(self._cfg, path)

    def request(self, verb: str | HttpVerb, path: str, parameters: Mapping[str, Any] | None = None) -> Any:
        """Send one API call and return the decoded JSON body.

        Raises ``MissingCredentialError`` or ``UnsupportedVerbError`` before
        any I/O, and ``ApiError`` (``AuthError``/``NetworkError``) after it.
        Rate-limit headers are captured from every response that arrived,
        including error responses.
        """
        req = build_request(self._cfg, verb, path, parameters)
        logger.debug("%s %s", req.verb.value, req.url)
        try:
            response = self._t.send(req)
        except httpx.HTTPStatusError as e:
            self._capture_rate_limit(e.response)
            raise translate_error(e) from e
        except httpx.RequestError as e:
            raise translate_error(e) from e

        self._capture_rate_limit(response)
        return handle_response(response)

    def get(self, path: str, parameters: Mapping[str, Any] | None = None) -> Any:
        return self.request(HttpVerb.GET, path, parameters)

    def post(self, path: str, parameters: Mapping[str, Any] | None = None) -> Any:
        return self.request(HttpVerb.POST, path, parameters)

    def put(self, path: str, parameters: Mapping[str, Any] | None = None) -> Any:
        return self.request(HttpVerb.PUT, path, parameters)

    def patch(self, path: str, parameters: Mapping[str, Any] | None = None) -> Any:
        return self.request(HttpVerb.PATCH, path, parameters)

    def delete(self, path: str, parameters: Mapping[str, Any] | None = None) -> Any:
        return self.request(HttpVerb.DELETE, path, parameters)

    def enforce_sandbox(self, message: str | None = None) -> None:
        """Guard for operations that only make sense against sandbox data."""
        if not self._cfg.use_sandbox:
            raise SandboxRequiredError(message or DEFAULT_SANDBOX_MESSAGE)

    def _capture_rate_limit(self, response: httpx.Response) -> None:
        # must never replace the result or error of the call itself
        try:
            snapshot = parse_rate_limit(response.headers)
        except Exception:
            logger.debug("rate limit capture failed", exc_info=True)
            return
        if snapshot is None:
            return
        with self._rate_limit_lock:
            self._rate_limit = snapshot
        logger.debug("rate limit %s/%s, resets at %s", snapshot.remaining, snapshot.limit, snapshot.reset_at)

    # --- API methods ---
    def request_ride(self, attributes: Mapping[str, Any] | None = None) -> Any:
        return self.post("bookings/create", attributes)


def _as_transport(transport: Transport | httpx.Client | None) -> Transport:
    if isinstance(transport, Transport):
        return transport
    return Transport(transport)
