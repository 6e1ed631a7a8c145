"""
ZIP extraction for downloaded dataset archives.

:func:`extract_archive` recreates the archive's directory/file layout below a
destination directory. Existing files are truncated and overwritten, so
re-running an extraction into the same directory is harmless.

Members whose path would land outside the destination (absolute names or
``..`` segments) abort the extraction with
:class:`~chaosdump.utils.errors.UnsafeArchiveError` before anything is
written for them.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import zipfile
import zlib
from pathlib import Path
from typing import List

from chaosdump.utils.errors import ArchiveError, UnsafeArchiveError
from chaosdump.utils.paths import is_within

log = logging.getLogger(__name__)

# ZipInfo.create_system value for archives written on Unix.
_UNIX = 3


# ---------------------------------------------------------------------------
# 0 – member helpers
# ---------------------------------------------------------------------------


def _member_target(info: zipfile.ZipInfo, dest: Path) -> Path:
    """Return the on-disk path for *info*, refusing anything outside *dest*."""
    name = info.filename
    target = dest / name
    if os.path.isabs(name) or not is_within(target, dest):
        raise UnsafeArchiveError(name, str(dest))
    return target


def _member_mode(info: zipfile.ZipInfo) -> int | None:
    """Return the permission bits recorded for *info*, if any."""
    if info.create_system != _UNIX:
        return None
    mode = stat.S_IMODE(info.external_attr >> 16)
    return mode or None


def _write_member(zf: zipfile.ZipFile, info: zipfile.ZipInfo, target: Path) -> None:
    """Stream one file member to *target* with truncate semantics."""
    target.parent.mkdir(parents=True, exist_ok=True)
    if target.exists() and not os.access(target, os.W_OK):
        # A read-only copy from an earlier run would block the overwrite.
        target.unlink()

    try:
        src = zf.open(info)
    except (zipfile.BadZipFile, NotImplementedError, RuntimeError) as exc:
        raise ArchiveError(f"cannot read member {info.filename!r}: {exc}") from exc

    with src, open(target, "wb") as out:
        try:
            shutil.copyfileobj(src, out)
        except (zipfile.BadZipFile, zlib.error, EOFError) as exc:
            # CRC mismatch, corrupt deflate stream, truncated data
            raise ArchiveError(f"corrupt member {info.filename!r}: {exc}") from exc

    mode = _member_mode(info)
    if mode is not None:
        os.chmod(target, mode)


# ---------------------------------------------------------------------------
# 1 – public entry point
# ---------------------------------------------------------------------------


def extract_archive(
    archive: Path,
    dest: Path,
    logger: logging.Logger | None = None,
) -> List[Path]:
    """Extract every member of the ZIP *archive* below *dest*.

    Args:
        archive: Local ZIP file.
        dest: Destination directory; created when missing.
        logger: Existing logger to attach messages to. Defaults to the module
            logger.

    Returns:
        Files written, in archive order.

    Raises:
        ArchiveError: When *archive* cannot be opened as a ZIP file or a member
            cannot be decompressed.
        UnsafeArchiveError: When a member would escape *dest*.
        OSError: When a directory or file cannot be written. The first failure
            stops extraction of the remaining members.
    """
    logger = logger or log
    dest = Path(dest)
    dest.mkdir(parents=True, exist_ok=True)

    try:
        zf = zipfile.ZipFile(archive)
    except (zipfile.BadZipFile, OSError) as exc:
        raise ArchiveError(f"error opening zip file {archive}: {exc}") from exc

    written: list[Path] = []
    with zf:
        logger.debug("Unzipping %s → %s (%d members)", archive, dest, len(zf.infolist()))
        for info in zf.infolist():
            target = _member_target(info, dest)
            if info.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue
            _write_member(zf, info, target)
            written.append(target)
            logger.debug("Extracted file: %s", target)

    return written


__all__ = ["extract_archive"]
