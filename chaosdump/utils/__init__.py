"""
Public façade for the *utils* package.

Anything imported here becomes part of the *stable* public API.
"""

from __future__ import annotations

from .display import echo_banner, echo_entry, echo_success, echo_failure
from .errors import (
    ArchiveError,
    ChaosDumpError,
    NetworkError,
    SelectionError,
    UnsafeArchiveError,
)
from .filters import split_commas
from .paths import ensure_dir, is_within

__all__: list[str] = [
    # display
    "echo_banner",
    "echo_entry",
    "echo_success",
    "echo_failure",
    # errors
    "ArchiveError",
    "ChaosDumpError",
    "NetworkError",
    "SelectionError",
    "UnsafeArchiveError",
    # filters / paths
    "split_commas",
    "ensure_dir",
    "is_within",
]
