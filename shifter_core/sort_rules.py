"""
sort_rules.py - Processing Order

Shifting up processes the highest numbers first, shifting down the lowest
first. Staging names already keep the two phases apart, so this order only
affects what the user sees, not correctness.
"""

from typing import List
from .models_fs import FileEntry


def order_for_shift(entries: List[FileEntry], shift: int) -> List[FileEntry]:
    """
    Sort entries for a shift

    Args:
        entries: Entries in enumeration order
        shift: Shift amount

    Returns:
        Sorted entries (new list); equal integers keep enumeration order
    """
    # sorted() stays stable with reverse=True
    return sorted(entries, key=lambda e: e.last_integer, reverse=shift > 0)
