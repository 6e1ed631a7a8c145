"""Download, extract and merge the selected Chaos datasets.

The command is exposed as ``chaosdump-cli download``. Exactly one selection
source is expected: ``--names``/``--input-file`` (which may be combined) or
``--all``. Without any of them the help text is shown and nothing happens.

Fatal conditions (base directory not creatable, names file unreadable, index
unreachable or undecodable) abort with ``Error: …`` and exit status 1. A
failing dataset is reported and skipped; the run goes on with the rest.
"""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from chaosdump.pipelines.concat import concatenate_text_files
from chaosdump.pipelines.index import fetch_index
from chaosdump.pipelines.process import process_entries
from chaosdump.utils.display import echo_banner, echo_entry, echo_failure, echo_success
from chaosdump.utils.errors import NetworkError
from chaosdump.utils.paths import ensure_dir

from ._shared import build_selection, open_session, selection_options

log = structlog.get_logger()


@click.command(
    name="download",
    help="Download the selected datasets, unzip them and merge their text files.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@selection_options
@click.option("-a", "--all", "select_all", is_flag=True, help="Process every dataset in the index.")
@click.option(
    "-o",
    "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory receiving one sub-directory per dataset [config: base_dir].",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Combined text file [config: output_file].",
)
@click.option("--index-url", metavar="<url>", help="Override the index location.")
@click.option("--no-concat", is_flag=True, help="Skip the final merge step.")
@click.pass_context
def cli(
    ctx: click.Context,
    names: tuple[str, ...],
    input_file: Path | None,
    select_all: bool,
    base_dir: Path | None,
    output: Path | None,
    index_url: str | None,
    no_concat: bool,
) -> None:
    """Entry-point for ``chaosdump-cli download``."""
    if not (names or input_file or select_all):
        click.echo(ctx.get_help())
        return

    cfg = ctx.obj["cfg"]
    base_dir = base_dir or cfg.base_dir
    output = output or cfg.output_file
    index_url = index_url or cfg.index_url

    # ---------------------------- preconditions ------------------------------
    try:
        ensure_dir(base_dir)
    except OSError as exc:
        raise click.ClickException(f"Failed to create base directory {base_dir}: {exc}") from exc

    selection = build_selection(ctx, names, input_file, select_all)
    log.debug("selection", names=sorted(selection) if selection is not None else "all")

    with open_session(cfg) as session:
        try:
            entries = fetch_index(index_url, session=session, timeout=cfg.timeout)
        except NetworkError as exc:
            raise click.ClickException(f"Failed to process URLs: {exc}") from exc

        # ------------------------------ download -----------------------------
        echo_banner("Download datasets")
        result = process_entries(
            entries,
            base_dir,
            selection=selection,
            session=session,
            timeout=cfg.timeout,
            on_entry=lambda entry: echo_entry(entry.name),
        )

    for name, cause in result.failed.items():
        echo_failure(f"{name}: {cause}")
    if result.unmatched:
        click.echo(f"Not in index: {', '.join(result.unmatched)}", err=True)
    echo_success(f"{result.count} dataset(s) processed into {base_dir}")

    if no_concat:
        return

    # ------------------------------- merge -----------------------------------
    echo_banner("Merge text files")
    try:
        merged = concatenate_text_files(base_dir, output, suffix=cfg.text_suffix)
    except OSError as exc:
        raise click.ClickException(
            f"Failed to concatenate all {cfg.text_suffix} files: {exc}"
        ) from exc

    echo_success(
        f"Successfully created {merged.output} with all {cfg.text_suffix} file content."
    )
