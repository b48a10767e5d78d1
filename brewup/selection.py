"""
Active category selection from command-line input.
"""

from __future__ import annotations

from typing import AbstractSet

from .config import CATEGORY_NAMES, HIGHEST_PRIORITY, PRIORITY


def select_categories(categories_arg: str | None, priority: bool = False) -> frozenset[str]:
    """
    Derive the categories to process for this run.

    Names given with -c are taken verbatim (after trimming whitespace) and are
    not validated; unknown names simply match nothing.

    Args:
        categories_arg: Comma-separated category names, or None
        priority: Select highest_priority and priority

    Returns:
        Selected category names; all categories if nothing was selected
    """
    selected: set[str] = set()

    if priority:
        selected.update((HIGHEST_PRIORITY, PRIORITY))

    if categories_arg:
        for name in categories_arg.split(","):
            selected.add(name.strip())

    if not selected:
        selected.update(CATEGORY_NAMES)

    return frozenset(selected)


def is_full_selection(selection: AbstractSet[str]) -> bool:
    """True when as many categories are selected as exist (count only)."""
    return len(selection) == len(CATEGORY_NAMES)
