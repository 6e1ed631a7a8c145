"""Helpers for creating output directories and checking path containment."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

log = structlog.get_logger()


def ensure_dir(path: Path) -> Path:
    """Create *path* (and parents) if missing and return it.

    Pre-existing directories are not an error.

    Raises:
        OSError: If the directory cannot be created, e.g. because a regular
            file already occupies the path.
    """
    path.mkdir(parents=True, exist_ok=True)
    log.debug("ensure_dir", path=str(path))
    return path


def is_within(path: Path, root: Path) -> bool:
    """Return ``True`` when *path* resolves to *root* or somewhere below it.

    Only the lexical form is inspected (``..`` segments are collapsed), so the
    check works for paths that do not exist yet.
    """
    root_abs = os.path.normpath(os.path.abspath(root))
    path_abs = os.path.normpath(os.path.abspath(path))
    return os.path.commonpath([root_abs, path_abs]) == root_abs


__all__ = ["ensure_dir", "is_within"]
