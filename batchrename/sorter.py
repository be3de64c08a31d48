"""Sorting of listed names by name, modification date or size."""

from collections.abc import Sequence
from functools import cmp_to_key
import locale
import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .constants import MSG_SORT_ERROR, MSG_SORT_NOT_FOUND
from .core import SortKey

console = Console()


def _stat_comparator(key: SortKey, base_dir: str | Path):
    """Build a comparator that re-stats both names on every comparison.

    A pair that cannot be stat'ed compares equal so the sort always
    finishes.
    """

    def compare(a: str, b: str) -> int:
        try:
            stat_a = os.stat(os.path.join(base_dir, a))
            stat_b = os.stat(os.path.join(base_dir, b))
        except FileNotFoundError:
            console.print(f"[yellow]{MSG_SORT_NOT_FOUND}[/yellow]")
            return 0
        except OSError as e:
            console.print(
                f"[red]{escape(MSG_SORT_ERROR.format(error=e))}[/red]", highlight=False
            )
            return 0

        if key is SortKey.DATE:
            left, right = stat_a.st_mtime, stat_b.st_mtime
        else:
            left, right = stat_a.st_size, stat_b.st_size
        return (left > right) - (left < right)

    return compare


def sort_items(
    key: SortKey | None,
    names: Sequence[str],
    base_dir: str | Path,
) -> list[str]:
    """Return a new list of names sorted ascending by the given key.

    With no key the names come back in their original order.
    """
    if key is None:
        return list(names)

    if key is SortKey.NAME:
        return sorted(names, key=locale.strxfrm)

    return sorted(names, key=cmp_to_key(_stat_comparator(key, base_dir)))
