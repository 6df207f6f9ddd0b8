from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping

logger = logging.getLogger(__name__)

LIMIT_HEADER = "X-Rate-Limit-Limit"
REMAINING_HEADER = "X-Rate-Limit-Remaining"
RESET_HEADER = "X-Rate-Limit-Reset"


@dataclass(frozen=True)
class RateLimit:
    limit: int
    remaining: int
    reset_at: datetime


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        # plain dicts are case-sensitive, httpx.Headers is not
        lowered = name.lower()
        value = next((v for k, v in headers.items() if k.lower() == lowered), None)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def parse_rate_limit(headers: Mapping[str, str]) -> RateLimit | None:
    """Snapshot of the rate-limit headers, or ``None``.

    Only a response carrying all three headers produces a snapshot. One or
    two of them, or a value that is not an integer, count as no data at
    all so a partial snapshot is never stored.
    """
    raw = [_header(headers, name) for name in (LIMIT_HEADER, REMAINING_HEADER, RESET_HEADER)]
    if any(value is None for value in raw):
        return None
    try:
        limit, remaining, reset = (int(value) for value in raw)
        reset_at = datetime.fromtimestamp(reset, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        logger.debug("ignoring malformed rate limit headers: %r", raw)
        return None
    return RateLimit(limit=limit, remaining=remaining, reset_at=reset_at)
