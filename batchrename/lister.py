"""Directory listing and item-type filtering."""

import os
from pathlib import Path

from .constants import MSG_NOT_FOUND
from .core import Entry, ItemType, ListingResult


def read_entries(directory: str | Path) -> list[Entry]:
    """Read the immediate entries of a directory in enumeration order.

    Symlinks are followed, so a link to a folder counts as a folder.
    Raises OSError if the directory or any entry cannot be read.
    """
    entries = []
    for name in os.listdir(directory):
        st = os.stat(os.path.join(directory, name))
        entries.append(Entry.from_stat(name, st))
    return entries


def list_items(
    directory: str | Path,
    item_type: ItemType,
    include_hidden: bool = True,
) -> ListingResult:
    """List the names of entries in a directory matching the item type.

    Returns an EMPTY result when nothing matches and a FATAL result when
    the directory or one of its entries cannot be read. Deciding whether
    to exit is left to the caller.
    """
    try:
        entries = read_entries(directory)
    except OSError as e:
        return ListingResult.fatal(str(e))

    names = [
        entry.name
        for entry in entries
        if entry.kind is item_type and (include_hidden or not entry.is_hidden)
    ]

    if not names:
        return ListingResult.empty(MSG_NOT_FOUND.format(item_type=item_type.value))
    return ListingResult.success(names)
