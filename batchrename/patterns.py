"""Pattern-based name generation."""

import os

from .constants import (
    MSG_EMPTY_SELECTION,
    MSG_PATTERN_MISSING,
    MSG_TERM_NULL,
    MSG_TERM_SEPARATOR,
)
from .core import OrderedSelection, PatternKind, PatternSpec, PlanResult, RenameOp


def split_name(name: str) -> tuple[str, str]:
    """Split a name into its base and final extension (with the dot).

    Names without a dot, or whose only dot is the leading one, have an
    empty extension.
    """
    return os.path.splitext(name)


def check_term(term: str) -> None:
    """Raise ValueError if the term would move entries out of their directory."""
    separators = [sep for sep in (os.sep, os.altsep) if sep]
    if any(sep in term for sep in separators):
        raise ValueError(MSG_TERM_SEPARATOR)
    if "\0" in term:
        raise ValueError(MSG_TERM_NULL)


def new_name_for(name: str, index: int, pattern: PatternSpec) -> str:
    """Compute the new name for the entry at a 0-based position."""
    base, ext = split_name(name)
    term = pattern.term or ""

    if pattern.kind is PatternKind.NUMBERING:
        return f"{index + 1}{ext}"
    if pattern.kind is PatternKind.PREFIX:
        return f"{term}{base}{ext}"
    if pattern.kind is PatternKind.SUFFIX:
        return f"{base}{term}{ext}"
    raise ValueError(MSG_PATTERN_MISSING)


def generate_renames(selection: OrderedSelection, pattern: PatternSpec) -> PlanResult:
    """Plan one RenameOp per selected name, keeping the selection order."""
    if not isinstance(pattern.kind, PatternKind):
        return PlanResult.fatal(MSG_PATTERN_MISSING)
    if pattern.needs_term:
        try:
            check_term(pattern.term or "")
        except ValueError as e:
            return PlanResult.fatal(str(e))
    if not selection:
        return PlanResult.empty(MSG_EMPTY_SELECTION)

    ops = [
        RenameOp(old_name=name, new_name=new_name_for(name, i, pattern))
        for i, name in enumerate(selection)
    ]
    return PlanResult.success(ops)
