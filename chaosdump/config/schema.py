"""
Pydantic model that mirrors the YAML configuration consumed by *chaosdump*.

The rest of the codebase works with a validated :class:`ChaosConfig` instead of
ad-hoc dictionaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_INDEX_URL = "https://chaos-data.projectdiscovery.io/index.json"


class ChaosConfig(BaseModel):
    """Root configuration object.

    Attributes:
        version: Version string of the configuration schema.
        index_url: Location of the JSON index listing every dataset.
        base_dir: Directory receiving one sub-directory per extracted entry.
        output_file: Combined text file written after extraction.
        text_suffix: Exact, case-sensitive filename suffix of files merged into
            *output_file*.
        timeout: Per-request HTTP timeout in seconds.
        user_agent: Optional ``User-Agent`` header; the CLI fills in
            ``chaosdump/<version>`` when unset.
    """

    version: str = "1.0"
    index_url: str = DEFAULT_INDEX_URL
    base_dir: Path = Path("AllChaosData")
    output_file: Path = Path("everything.txt")
    text_suffix: str = ".txt"
    timeout: float = Field(60.0, gt=0)
    user_agent: Optional[str] = None

    @field_validator("text_suffix")
    @classmethod
    def _suffix_not_empty(cls, v: str) -> str:
        """Reject an empty suffix, which would match every file."""
        if not v:
            raise ValueError("text_suffix must not be empty")
        return v
