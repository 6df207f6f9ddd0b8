from __future__ import annotations

from .config_types import ClientConfig
from .errors import MissingCredentialError


def authorization_header(cfg: ClientConfig) -> str:
    if cfg.access_token:
        return f"Bearer {cfg.access_token}"
    raise MissingCredentialError("Provide access token")


def build_headers(cfg: ClientConfig) -> dict[str, str | None]:
    """Headers sent with every request.

    The access token is checked here rather than at construction, so each
    request fails before any I/O when it is missing. ``X-APP-TOKEN`` may be
    ``None``; the transport drops such headers.
    """
    return {
        "Authorization": authorization_header(cfg).strip(),
        "Accept-Language": (cfg.locale or "").strip(),
        "X-APP-TOKEN": cfg.app_token,
        "Content-Type": "application/json",
    }
