"""
Download and unpack the selected index entries, one at a time.

Each entry is fetched into a temporary ``*.zip`` that never outlives the
call, then extracted into ``<base_dir>/<name>``. A failing entry is logged,
recorded in the returned :class:`~chaosdump.pipelines.types.ProcessResult`
and skipped; it never stops the entries that follow.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

import requests

from chaosdump.api.client import http_get
from chaosdump.models import IndexEntry, Selection
from chaosdump.utils.errors import ChaosDumpError, NetworkError
from chaosdump.utils.paths import ensure_dir, is_within

from .extract import extract_archive
from .selection import is_selected
from .types import ProcessResult

log = logging.getLogger(__name__)

_CHUNK_SIZE = 1 << 16


@contextmanager
def download_to_tempfile(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> Iterator[Path]:
    """Stream *url* into a temporary file and yield its path.

    The file is removed when the ``with`` block exits, whether the download,
    the caller's processing, or neither failed.

    Raises:
        NetworkError: On transport failure or HTTP error status.
        OSError: When the temporary file cannot be created or written.
    """
    try:
        resp = http_get(session, url, stream=True, timeout=timeout)
    except requests.exceptions.RequestException as exc:
        raise NetworkError(f"error downloading {url}: {exc}") from exc

    with resp:
        fd, name = tempfile.mkstemp(prefix="chaosdump-", suffix=".zip")
        tmp = Path(name)
        try:
            with os.fdopen(fd, "wb") as fh:
                try:
                    for chunk in resp.iter_content(chunk_size=_CHUNK_SIZE):
                        if chunk:
                            fh.write(chunk)
                except requests.exceptions.RequestException as exc:
                    raise NetworkError(f"error downloading {url}: {exc}") from exc
            yield tmp
        finally:
            tmp.unlink(missing_ok=True)


def _entry_dir(base_dir: Path, name: str) -> Path:
    """Return ``<base_dir>/<name>``, rejecting names that leave *base_dir*."""
    target = base_dir / name
    if name in {"", ".", ".."} or os.path.isabs(name) or not is_within(target, base_dir):
        raise ChaosDumpError(f"entry name {name!r} is not a valid directory name")
    return target


def process_entry(
    entry: IndexEntry,
    base_dir: Path,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    logger: logging.Logger | None = None,
) -> list[Path]:
    """Download *entry* and extract it into ``<base_dir>/<entry.name>``.

    Returns:
        Files written by the extractor.

    Raises:
        ChaosDumpError: Download or archive failure (see subclasses).
        OSError: Directory creation or file write failure.
    """
    logger = logger or log
    out_dir = _entry_dir(base_dir, entry.name)
    with download_to_tempfile(entry.url, session=session, timeout=timeout) as archive:
        ensure_dir(out_dir)
        return extract_archive(archive, out_dir, logger=logger)


def process_entries(
    entries: Iterable[IndexEntry],
    base_dir: Path,
    *,
    selection: Selection = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    on_entry: Optional[Callable[[IndexEntry], None]] = None,
    logger: logging.Logger | None = None,
) -> ProcessResult:
    """Process every entry that passes *selection*, isolating failures.

    Args:
        entries: Decoded index entries, processed in the given order.
        base_dir: Parent of the per-entry output directories.
        selection: Lower-case names to keep; ``None`` keeps everything.
        session: Optional HTTP session shared by all downloads.
        timeout: Per-request timeout in seconds.
        on_entry: Called with each selected entry before it is fetched; the
            CLI uses it for the progress notice.
        logger: Logger to report through; defaults to the module logger.

    Returns:
        Completed names, failures with their cause, and selected names the
        index never mentioned.
    """
    logger = logger or log
    base_dir = Path(base_dir)

    completed: list[str] = []
    failed: dict[str, str] = {}
    seen: set[str] = set()

    for entry in entries:
        if not is_selected(entry.name, selection):
            continue
        seen.add(entry.key)

        if on_entry is not None:
            on_entry(entry)
        logger.info("Processing %s...", entry.name)

        try:
            written = process_entry(
                entry, base_dir, session=session, timeout=timeout, logger=logger
            )
        except (ChaosDumpError, OSError) as exc:
            logger.error("Failed to process %s: %s", entry.name, exc)
            failed[entry.name] = str(exc)
            continue

        logger.debug("%s: %d file(s) extracted", entry.name, len(written))
        completed.append(entry.name)

    unmatched = sorted(selection - seen) if selection is not None else []
    if unmatched:
        logger.warning("No index entry for: %s", ", ".join(unmatched))

    logger.info(
        "Processed %d entr%s (%d failed)",
        len(completed),
        "y" if len(completed) == 1 else "ies",
        len(failed),
    )
    return ProcessResult(completed=completed, failed=failed, unmatched=unmatched)


__all__ = ["download_to_tempfile", "process_entry", "process_entries"]
