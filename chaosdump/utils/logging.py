"""
Package-level logging configuration.

* Rich console output (colourised, nicely formatted).
* Rotating **JSON** log file when ``$CHAOSDUMP_LOG_DIR`` is set (or a
  directory is passed explicitly).
* Optional plain-text mirror controlled via ``--save-logfile`` on the CLI.

The public helper :func:`setup_logging` wires everything and should be the
sole entry-point used by the CLI layer.
"""

from __future__ import annotations

import atexit
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

import structlog
from rich.logging import RichHandler
from structlog.dev import ConsoleRenderer as StructlogConsoleRenderer
from structlog.stdlib import LoggerFactory

__all__ = ["setup_logging"]


# --------------------------------------------------------------------------- #
# Internal helpers – file-based handlers                                      #
# --------------------------------------------------------------------------- #
def _json_file_handler(log_dir: Path | None, level: int) -> logging.Handler | None:
    """Return a rotating file handler or *None* when no log directory is known.

    Args:
        log_dir: Explicit directory; ``$CHAOSDUMP_LOG_DIR`` is consulted when
            *None*.
        level: Log-level for the handler.
    """
    env_dir = os.environ.get("CHAOSDUMP_LOG_DIR")
    if log_dir is None and env_dir:
        log_dir = Path(env_dir).expanduser()
    if log_dir is None:
        return None
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=log_dir / "chaosdump.log",
        maxBytes=5_000_000,  # ~5 MB before rollover
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    # One JSON object per line, for stdlib and structlog records alike.
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    return handler


def _plain_text_file_handler(
    path: Optional[Path], level: int
) -> logging.Handler | None:
    """Return a plain-text file handler or *None* when *path* is *None*.

    Args:
        path: Destination file.
        level: Log-level for the handler.
    """
    if path is None:
        return None

    path = path.expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(path, encoding="utf-8", mode="a")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    # Ensure the buffer is flushed on interpreter exit.
    atexit.register(handler.close)
    return handler


# --------------------------------------------------------------------------- #
# Public API – main entry-point                                               #
# --------------------------------------------------------------------------- #
def setup_logging(
    *,
    verbose: bool = False,
    debug: bool = False,
    log_dir: Optional[Path] = None,
    extra_text_log: Optional[Path] = None,
) -> None:
    """Configure rich console logging and optional file mirrors.

    Args:
        verbose: Emit INFO-level messages to the console.
        debug: Emit DEBUG-level messages plus rich tracebacks.
        log_dir: Directory for the rotating JSON log. Falls back to
            ``$CHAOSDUMP_LOG_DIR``; no JSON log is written when both are unset.
        extra_text_log: Optional path for a plain-text mirror of console output.
    """
    console_lvl = (
        logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    )
    file_lvl = logging.DEBUG if debug else logging.INFO

    handlers: list[logging.Handler] = [
        RichHandler(
            level=console_lvl,
            rich_tracebacks=debug,
            tracebacks_show_locals=False,
            markup=False,
            show_path=debug,
        )
    ]

    json_handler = _json_file_handler(log_dir, file_lvl)
    if json_handler:
        handlers.append(json_handler)

    txt_handler = _plain_text_file_handler(extra_text_log, console_lvl)
    if txt_handler:
        handlers.append(txt_handler)

    # Root logger stays at DEBUG; handlers filter. ``force`` lets repeated CLI
    # invocations inside one interpreter (tests) re-wire the handlers.
    logging.basicConfig(
        level=logging.DEBUG,
        handlers=handlers,
        format="%(message)s",
        force=True,
    )
    # urllib3 chatter is only interesting when debugging.
    logging.getLogger("urllib3").setLevel(
        logging.DEBUG if debug else logging.WARNING
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            (
                StructlogConsoleRenderer(colors=False)
                if verbose or debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(console_lvl),
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=False,
    )
