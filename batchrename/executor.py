"""Applying a planned rename batch to the filesystem."""

import asyncio
from collections.abc import Sequence
import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .core import RenameOp, RenameResult

console = Console()


async def rename_one(base_dir: Path, op: RenameOp) -> RenameResult:
    """Rename a single entry, reporting instead of raising on failure."""
    old_path, new_path = op.paths(base_dir)
    try:
        await asyncio.to_thread(os.rename, old_path, new_path)
    except (OSError, ValueError) as e:
        console.print(
            f"[red]Failed to rename {escape(str(old_path))} → "
            f"{escape(str(new_path))}: {escape(str(e))}[/red]",
            highlight=False,
        )
        return RenameResult(op=op, success=False, error=str(e))
    return RenameResult(op=op, success=True)


async def apply_renames(
    base_dir: str | Path, ops: Sequence[RenameOp]
) -> list[RenameResult]:
    """Apply renames strictly in order, one awaited rename at a time.

    A failed rename is reported and skipped; the rest of the batch still
    runs and earlier renames are kept.
    """
    base_dir = Path(base_dir)
    results = []
    for op in ops:
        results.append(await rename_one(base_dir, op))
    return results


def summarize(results: Sequence[RenameResult]) -> tuple[int, int]:
    """Count succeeded and failed renames."""
    succeeded = sum(1 for result in results if result.success)
    return succeeded, len(results) - succeeded
