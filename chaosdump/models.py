"""
Domain-level data models shared across the pipeline and CLI layers.

* **`IndexEntry`** – one dataset reference decoded from the remote index.
* **`Selection`** – the operator-chosen subset of entry names, or ``None`` for
  "process everything".
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

log = logging.getLogger(__name__)

#: Lower-case entry names to process; ``None`` disables filtering.
Selection = Optional[frozenset]


class IndexEntry(BaseModel):
    """Named dataset and the URL of its ZIP archive.

    The index spells the URL key ``"URL"``; lower-case ``"url"`` is accepted as
    well so hand-written fixtures stay readable. Unknown keys (``program_url``,
    ``count``, …) are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1)
    url: str = Field(..., validation_alias=AliasChoices("URL", "url"))

    @property
    def key(self) -> str:
        """Case-folded name used for selection matching."""
        return self.name.lower()


def parse_entries(items: Iterable[Any]) -> List[IndexEntry]:
    """Validate raw index objects, skipping the ones that do not fit the schema.

    Args:
        items: Decoded JSON array members.

    Returns:
        Valid entries in index order.
    """
    entries: list[IndexEntry] = []
    for pos, raw in enumerate(items):
        try:
            entries.append(IndexEntry.model_validate(raw))
        except ValidationError as exc:
            log.warning(
                "Skipping index item #%d: %s",
                pos,
                "; ".join(e["msg"] for e in exc.errors()),
            )
    return entries


__all__ = ["IndexEntry", "Selection", "parse_entries"]
