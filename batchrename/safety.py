"""
Collision checks for a planned rename batch.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .constants import COLLISION_DUPLICATE, COLLISION_EXISTS
from .core import RenameOp


@dataclass
class Collision:
    """A planned rename whose target is occupied when it would run."""

    op: RenameOp
    reason: str


def find_collisions(
    ops: Sequence[RenameOp], existing_names: Iterable[str]
) -> list[Collision]:
    """Walk the batch in order and report targets that are already taken.

    ``existing_names`` is the full content of the directory, not only the
    selected entries. A target freed by an earlier op in the batch is not
    a collision.
    """
    occupied = set(existing_names)
    produced: set[str] = set()
    collisions = []

    for op in ops:
        if op.is_noop:
            continue

        if op.new_name in occupied:
            reason = COLLISION_DUPLICATE if op.new_name in produced else COLLISION_EXISTS
            collisions.append(Collision(op=op, reason=reason))
            # Treated as not applied for the rest of the walk.
            continue

        occupied.discard(op.old_name)
        occupied.add(op.new_name)
        produced.add(op.new_name)

    return collisions

