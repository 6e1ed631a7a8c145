"""List the datasets published in the index (``chaosdump-cli list``)."""

from __future__ import annotations

from pathlib import Path

import click

from chaosdump.pipelines.index import fetch_index
from chaosdump.pipelines.selection import is_selected
from chaosdump.utils.errors import NetworkError

from ._shared import build_selection, open_session, selection_options


@click.command(
    name="list",
    help="Print dataset names from the index, optionally filtered.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@selection_options
@click.option("--urls", is_flag=True, help="Print the archive URL next to each name.")
@click.option("--index-url", metavar="<url>", help="Override the index location.")
@click.pass_context
def cli(
    ctx: click.Context,
    names: tuple[str, ...],
    input_file: Path | None,
    urls: bool,
    index_url: str | None,
) -> None:
    """Entry-point for ``chaosdump-cli list``."""
    cfg = ctx.obj["cfg"]
    selection = (
        build_selection(ctx, names, input_file, False) if (names or input_file) else None
    )

    with open_session(cfg) as session:
        try:
            entries = fetch_index(
                index_url or cfg.index_url, session=session, timeout=cfg.timeout
            )
        except NetworkError as exc:
            raise click.ClickException(str(exc)) from exc

    for entry in entries:
        if not is_selected(entry.name, selection):
            continue
        click.echo(f"{entry.name}\t{entry.url}" if urls else entry.name)
