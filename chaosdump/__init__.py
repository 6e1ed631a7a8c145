"""
chaosdump package initialisation.

The module performs two small tasks:

1. **Expose the version string**
   ``chaosdump.__version__`` is resolved at import-time from the installed
   distribution metadata so that the CLI, the HTTP ``User-Agent`` and the logs
   all report the same value.

2. **Re-export the public YAML loader**
   :func:`chaosdump.config.load_config` is re-exported at the top level so
   call-sites can simply do::

       from chaosdump import load_config
"""

from importlib.metadata import PackageNotFoundError, version

# --------------------------------------------------------------------------- #
# Version resolution
# --------------------------------------------------------------------------- #
try:
    __version__: str = version("chaosdump")
except PackageNotFoundError:
    # Source tree without an installed wheel.
    __version__ = "0.0.0"

# --------------------------------------------------------------------------- #
# Public re-exports
# --------------------------------------------------------------------------- #
from .config import load_config  # noqa: E402 – deliberate late import

__all__: list[str] = ["load_config", "__version__"]
