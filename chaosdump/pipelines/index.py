"""Fetch and decode the remote dataset index."""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from chaosdump.api.client import http_get
from chaosdump.models import IndexEntry, parse_entries
from chaosdump.utils.errors import NetworkError

log = logging.getLogger(__name__)


def fetch_index(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    logger: logging.Logger | None = None,
) -> List[IndexEntry]:
    """GET *url* and return the entries listed in the JSON array it serves.

    Entry URLs are not checked here; a malformed one surfaces later as a
    per-entry download failure.

    Args:
        url: Index location.
        session: Optional session (headers, connection reuse).
        timeout: Request timeout in seconds.
        logger: Logger to report through; defaults to the module logger.

    Returns:
        Decoded entries in index order. Objects without ``name`` / ``URL`` are
        dropped with a warning.

    Raises:
        NetworkError: On transport failure, HTTP error status, or a body that
            is not a JSON array.
    """
    logger = logger or log
    logger.info("Fetching index %s", url)

    try:
        resp = http_get(session, url, timeout=timeout)
    except requests.exceptions.RequestException as exc:
        raise NetworkError(f"error fetching JSON index {url}: {exc}") from exc

    try:
        payload = resp.json()
    except ValueError as exc:  # requests' JSONDecodeError is a ValueError
        raise NetworkError(f"error decoding JSON index {url}: {exc}") from exc
    finally:
        resp.close()

    if not isinstance(payload, list):
        raise NetworkError(
            f"error decoding JSON index {url}: expected an array, "
            f"got {type(payload).__name__}"
        )

    entries = parse_entries(payload)
    logger.info("Index lists %d entr%s", len(entries), "y" if len(entries) == 1 else "ies")
    return entries


__all__ = ["fetch_index"]
