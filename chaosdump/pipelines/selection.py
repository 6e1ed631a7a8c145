"""
Resolve which index entries a run should process.

A selection is a ``frozenset`` of lower-case names, or ``None`` meaning "no
filter". It can be built from

* an explicit comma-separated list (``-n tesla,google``),
* a newline-delimited file (``-i companies.txt``), or
* the *all* switch (``--all``).

Names are matched case-insensitively and never validated against the index
here; names the index does not know are reported by the item processor.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from chaosdump.models import Selection
from chaosdump.utils.errors import SelectionError

log = logging.getLogger(__name__)


def selection_from_names(names: Iterable[str]) -> frozenset:
    """Return stripped, lower-cased, non-empty *names* as a frozenset."""
    return frozenset(n.strip().lower() for n in names if n and n.strip())


def selection_from_csv(text: str) -> frozenset:
    """Parse a comma-separated name list.

    >>> sorted(selection_from_csv("Tesla, Google,,  Microsoft"))
    ['google', 'microsoft', 'tesla']
    """
    return selection_from_names(text.split(","))


def selection_from_file(path: str | Path) -> frozenset:
    """Read one name per line from *path*; blank lines are ignored.

    Raises:
        OSError: When the file cannot be opened or read.
    """
    with open(path, encoding="utf-8") as fh:
        names = selection_from_names(fh)
    log.debug("Read %d name(s) from %s", len(names), path)
    return names


def resolve_selection(
    names: Optional[Iterable[str]] = None,
    names_file: Optional[str | Path] = None,
    *,
    select_all: bool = False,
) -> Selection:
    """Build the selection from whichever source the operator supplied.

    *names* holds raw tokens; each may itself be a comma-separated list. When
    both *names* and *names_file* are given their union is returned.

    Args:
        names: Tokens from ``-n/--names``.
        names_file: Path from ``-i/--input-file``.
        select_all: ``True`` for ``--all``.

    Returns:
        A frozenset of names, or ``None`` when every entry should be processed.

    Raises:
        SelectionError: When no source was supplied, or *select_all* is
            combined with an explicit list.
        OSError: When *names_file* cannot be read.
    """
    names = tuple(names or ())
    if select_all:
        if names or names_file:
            raise SelectionError("--all cannot be combined with a name list or file")
        return None
    if not names and not names_file:
        raise SelectionError("no selection given: pass names, a names file or --all")

    selected: set[str] = set()
    for token in names:
        selected |= selection_from_csv(token)
    if names_file:
        selected |= selection_from_file(names_file)
    return frozenset(selected)


def is_selected(name: str, selection: Selection) -> bool:
    """Return ``True`` when *name* passes *selection* (case-insensitive)."""
    return selection is None or name.lower() in selection


__all__ = [
    "selection_from_names",
    "selection_from_csv",
    "selection_from_file",
    "resolve_selection",
    "is_selected",
]
