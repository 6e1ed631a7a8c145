"""
Light-weight HTTP helpers for talking to the Chaos data host.

Only the low-level mechanics of *sending* a request belong here; JSON decoding
and archive handling live in :mod:`chaosdump.pipelines`. Helpers return the raw
``requests.Response`` so callers decide how to treat status codes and bodies.
No retries are attempted.
"""

import os
from typing import Optional

import requests

DEFAULT_TIMEOUT = 60.0


def _default_timeout() -> Optional[float]:
    """Return the timeout configured via ``CHAOSDUMP_TIMEOUT`` or ``DEFAULT_TIMEOUT``."""
    env = os.getenv("CHAOSDUMP_TIMEOUT")
    if not env:
        return DEFAULT_TIMEOUT
    try:
        return float(env)
    except ValueError:
        return DEFAULT_TIMEOUT


def make_session(user_agent: Optional[str] = None) -> requests.Session:
    """Return a :class:`requests.Session` carrying the tool's ``User-Agent``."""
    session = requests.Session()
    if user_agent:
        session.headers.update({"User-Agent": user_agent})
    return session


def http_get(
    session: Optional[requests.Session],
    url: str,
    *,
    stream: bool = False,
    timeout: Optional[float] = None,
) -> requests.Response:
    """Send a GET request and raise for non-2xx statuses.

    Args:
        session: Session to reuse; the module-level :func:`requests.get` is
            used when *None*.
        url: Absolute URL.
        stream: Defer body download (used for archives).
        timeout: Seconds; ``None`` resolves via :func:`_default_timeout`.

    Returns:
        The raw :class:`requests.Response` object.

    Raises:
        requests.exceptions.RequestException: On transport errors or an HTTP
            error status.
    """
    if timeout is None:
        timeout = _default_timeout()

    getter = session.get if session is not None else requests.get
    resp = getter(url, stream=stream, timeout=timeout)
    try:
        resp.raise_for_status()
    except requests.exceptions.HTTPError:
        resp.close()
        raise
    return resp
