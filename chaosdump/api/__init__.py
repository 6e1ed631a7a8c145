"""HTTP helpers used by the index fetcher and the archive downloader."""

from .client import DEFAULT_TIMEOUT, http_get, make_session

__all__ = ["DEFAULT_TIMEOUT", "http_get", "make_session"]
