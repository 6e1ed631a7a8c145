"""
Typed, immutable value objects returned by the pipeline stages.

Every class inherits from :class:`pydantic.BaseModel` with ``frozen=True`` so
results cannot be mutated once a stage has reported them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, Field


class ProcessResult(BaseModel, frozen=True):
    """Summary of one pass of the item processor.

    Attributes
    ----------
    completed
        Entry names downloaded and extracted without error, in index order.
    failed
        Entry name → human-readable cause for every entry that was skipped.
    unmatched
        Selected names for which the index holds no entry (sorted).
    """

    completed: List[str] = Field(default_factory=list)
    failed: Dict[str, str] = Field(default_factory=dict)
    unmatched: List[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of entries processed successfully."""
        return len(self.completed)


class ConcatResult(BaseModel, frozen=True):
    """Summary of a concatenation run.

    Attributes
    ----------
    output
        Combined output file.
    files
        Source files copied completely, in the order they were written.
    failed
        Source files that could not be opened or copied.
    """

    output: Path
    files: List[Path] = Field(default_factory=list)
    failed: List[Path] = Field(default_factory=list)


__all__ = ["ProcessResult", "ConcatResult"]
