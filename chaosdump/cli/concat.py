"""Re-run only the merge step over an existing extraction tree.

Exposed as ``chaosdump-cli concat``; useful after manual edits to the base
directory or after ``download --no-concat``.
"""

from __future__ import annotations

from pathlib import Path

import click

from chaosdump.pipelines.concat import concatenate_text_files
from chaosdump.utils.display import echo_banner, echo_success


@click.command(
    name="concat",
    help="Merge every text file below the base directory into one file.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@click.option(
    "-o",
    "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Extraction tree to scan [config: base_dir].",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Combined text file [config: output_file].",
)
@click.option("--suffix", metavar="<ext>", help="Filename suffix to merge [config: text_suffix].")
@click.pass_obj
def cli(ctx_obj, base_dir: Path | None, output: Path | None, suffix: str | None) -> None:
    """Entry-point for ``chaosdump-cli concat``."""
    cfg = ctx_obj["cfg"]
    base_dir = base_dir or cfg.base_dir
    output = output or cfg.output_file
    suffix = suffix or cfg.text_suffix

    echo_banner("Merge text files")
    try:
        merged = concatenate_text_files(base_dir, output, suffix=suffix)
    except OSError as exc:
        raise click.ClickException(f"Failed to concatenate all {suffix} files: {exc}") from exc

    if merged.failed:
        click.echo(f"{len(merged.failed)} file(s) could not be read", err=True)
    echo_success(
        f"Successfully created {merged.output} with {len(merged.files)} {suffix} file(s)."
    )
