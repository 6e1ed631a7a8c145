"""
Merge every extracted text file into one combined output file.

Files are discovered recursively below the base directory and visited in
lexicographic path order so repeated runs produce identical output. Each
file's bytes are copied verbatim and followed by a single ``\\n``.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from .types import ConcatResult

log = logging.getLogger(__name__)


def find_text_files(base_dir: Path, suffix: str = ".txt") -> List[Path]:
    """Return every file below *base_dir* whose name ends with *suffix*.

    The suffix match is exact and case-sensitive (``A.TXT`` does not match
    ``.txt``). A missing *base_dir* yields an empty list.
    """
    base_dir = Path(base_dir)
    if not base_dir.is_dir():
        return []
    return sorted(
        p for p in base_dir.rglob("*") if p.is_file() and p.name.endswith(suffix)
    )


def concatenate_text_files(
    base_dir: Path,
    output: Path,
    *,
    suffix: str = ".txt",
    logger: logging.Logger | None = None,
) -> ConcatResult:
    """Write every matching file under *base_dir* into *output*.

    *output* is truncated first and always exists afterwards, even when no
    file matched. A source that cannot be opened or copied is logged and
    skipped; a failed separator write is logged and the loop continues.

    Args:
        base_dir: Root of the extracted tree.
        output: Combined output file.
        suffix: Filename suffix selecting the files to merge.
        logger: Logger to report through; defaults to the module logger.

    Returns:
        The output path together with copied and failed sources.

    Raises:
        OSError: When *output* itself cannot be created.
    """
    logger = logger or log
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)

    out_resolved = output.resolve()
    sources = [p for p in find_text_files(base_dir, suffix) if p.resolve() != out_resolved]
    logger.info("Concatenating %d file(s) into %s", len(sources), output)

    copied: list[Path] = []
    failed: list[Path] = []

    with open(output, "wb") as dest:
        for path in sources:
            try:
                src = open(path, "rb")
            except OSError as exc:
                logger.error("Failed to open %s for reading: %s", path, exc)
                failed.append(path)
                continue

            with src:
                try:
                    shutil.copyfileobj(src, dest)
                except OSError as exc:
                    logger.error("Failed to copy %s to %s: %s", path, output, exc)
                    failed.append(path)
                    continue

            try:
                dest.write(b"\n")
            except OSError as exc:
                logger.error("Failed to write newline after %s: %s", path, exc)
            copied.append(path)

    return ConcatResult(output=output, files=copied, failed=failed)


__all__ = ["find_text_files", "concatenate_text_files"]
