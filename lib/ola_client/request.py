from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .config_types import ClientConfig
from .errors import UnsupportedVerbError
from .headers import build_headers

DOMAIN = "olacabs.com"
SANDBOX_HOST = f"sandbox-t1.{DOMAIN}"
PRODUCTION_HOST = f"devapi.{DOMAIN}"


class HttpVerb(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, verb: str | HttpVerb) -> HttpVerb:
        if isinstance(verb, HttpVerb):
            return verb
        try:
            return cls(str(verb).strip().upper())
        except ValueError:
            raise UnsupportedVerbError(f"Unsupported HTTP verb: {verb!r}") from None


@dataclass(frozen=True)
class RequestDescriptor:
    verb: HttpVerb
    url: str
    headers: dict[str, str | None]
    query: dict[str, Any] | None = None
    json_body: dict[str, Any] | None = None


def host_for(cfg: ClientConfig) -> str:
    return SANDBOX_HOST if cfg.use_sandbox else PRODUCTION_HOST


def build_url(cfg: ClientConfig, path: str) -> str:
    path = path.lstrip("/")
    version = f"/{cfg.version}" if cfg.version else ""
    return f"https://{host_for(cfg)}{version}/{path}"


def build_request(
        cfg: ClientConfig,
        verb: str | HttpVerb,
        path: str,
        parameters: Mapping[str, Any] | None = None,
) -> RequestDescriptor:
    method = HttpVerb.parse(verb)
    headers = build_headers(cfg)
    query: dict[str, Any] | None = None
    json_body: dict[str, Any] | None = None
    if parameters:
        if method is HttpVerb.GET:
            query = dict(parameters)
        else:
            json_body = dict(parameters)
    return RequestDescriptor(
        verb=method,
        url=build_url(cfg, path),
        headers=headers,
        query=query,
        json_body=json_body,
    )
