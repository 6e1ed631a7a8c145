"""
Click callback helpers for name-selection options.

* ``split_commas`` – flatten repeated or comma-separated options into a single
  tuple of stripped, non-empty tokens.
"""

from __future__ import annotations


def split_commas(_ctx, _param, values: tuple[str, ...]) -> tuple[str, ...]:
    """Return a flat tuple from a *repeatable* / comma-separated Click option.

    Args:
        _ctx: Click context (ignored, required by Click callback signature).
        _param: Click parameter (ignored).
        values: Tuple emitted by Click for the option.

    Returns:
        Tuple with every comma-separated token stripped; empty tokens dropped.
    """
    flat: list[str] = []
    for v in values:
        flat.extend(filter(None, (x.strip() for x in v.split(","))))
    return tuple(flat)


__all__ = ["split_commas"]
