"""Option decorators and helpers shared by several sub-commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import click
import requests

from chaosdump import __version__
from chaosdump.api.client import make_session
from chaosdump.config import ChaosConfig
from chaosdump.models import Selection
from chaosdump.pipelines.selection import resolve_selection
from chaosdump.utils.errors import SelectionError
from chaosdump.utils.filters import split_commas


def selection_options(func: Callable) -> Callable:
    """Attach ``-n/--names`` and ``-i/--input-file`` to *func*."""
    func = click.option(
        "-i",
        "--input-file",
        type=click.Path(dir_okay=False, path_type=Path),
        help="File with dataset names, one per line.",
    )(func)
    func = click.option(
        "-n",
        "--names",
        multiple=True,
        callback=split_commas,
        metavar="<name>",
        help="Comma-separated dataset names (repeatable).",
    )(func)
    return func


def build_selection(
    ctx: click.Context,
    names: tuple[str, ...],
    input_file: Path | None,
    select_all: bool,
) -> Selection:
    """Turn the selection options into a :data:`~chaosdump.models.Selection`.

    Raises:
        click.UsageError: Conflicting options.
        click.ClickException: The names file cannot be read.
    """
    try:
        return resolve_selection(names, input_file, select_all=select_all)
    except SelectionError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Failed to read input file: {exc}") from exc


def open_session(cfg: ChaosConfig) -> requests.Session:
    """Return an HTTP session carrying the configured ``User-Agent``."""
    return make_session(cfg.user_agent or f"chaosdump/{__version__}")
