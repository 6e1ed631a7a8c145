"""
Pipeline stages: selection → index → download/extract → concatenate.

Each stage is importable on its own; the CLI wires them together.
"""

from .concat import concatenate_text_files, find_text_files
from .extract import extract_archive
from .index import fetch_index
from .process import download_to_tempfile, process_entries, process_entry
from .selection import (
    is_selected,
    resolve_selection,
    selection_from_csv,
    selection_from_file,
    selection_from_names,
)
from .types import ConcatResult, ProcessResult

__all__ = [
    "concatenate_text_files",
    "find_text_files",
    "extract_archive",
    "fetch_index",
    "download_to_tempfile",
    "process_entries",
    "process_entry",
    "is_selected",
    "resolve_selection",
    "selection_from_csv",
    "selection_from_file",
    "selection_from_names",
    "ConcatResult",
    "ProcessResult",
]
