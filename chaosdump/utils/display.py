"""Utility functions to print formatted CLI messages for progress updates."""

from __future__ import annotations

import click

__all__ = ["echo_banner", "echo_entry", "echo_success", "echo_failure"]


def echo_banner(text: str) -> None:
    """Print a colourful banner announcing a processing step.

    Args:
        text: Banner text.
    """
    click.secho(f"\n=== {text} ===", fg="cyan")


def echo_entry(name: str) -> None:
    """Echo the progress notice for a single index entry.

    Args:
        name: Entry name as listed in the index.
    """
    click.echo(f"Processing {name}...")


def echo_success(text: str) -> None:
    """Echo a green success message prefixed with a tick.

    Args:
        text: Message to display.
    """
    click.secho(f"✓ {text}", fg="green")


def echo_failure(text: str) -> None:
    """Echo a red failure line on *stderr*."""
    click.secho(f"✗ {text}", fg="red", err=True)
