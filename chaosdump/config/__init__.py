"""
Configuration package façade.

* :func:`load_config` – locate, parse and validate the YAML configuration.
* :class:`ChaosConfig` – Pydantic model representing the validated settings.
"""

from .loader import load_config  # noqa: F401  (import re-exposed on purpose)
from .schema import ChaosConfig, DEFAULT_INDEX_URL  # noqa: F401

__all__: list[str] = ["load_config", "ChaosConfig", "DEFAULT_INDEX_URL"]
