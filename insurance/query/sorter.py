"""
Sorter — orders policies by name.

"desc" (any case) sorts descending; every other token, including the
boundary default "aesc", sorts ascending. Names compare by code point
(case-sensitive). Policies without a name always come first, in both
directions, and equal names keep their incoming order.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..catalog.store import Policy

# Boundary default of the /policies/filter endpoint. The misspelling is part
# of the public contract; it simply falls through to ascending order.
DEFAULT_SORT_ORDER = "aesc"
DESCENDING = "desc"


def is_descending(order: Optional[str]) -> bool:
    return order is not None and order.lower() == DESCENDING


def sort_by_name(policies: Sequence[Policy], order: Optional[str] = DEFAULT_SORT_ORDER) -> List[Policy]:
    unnamed = [p for p in policies if p.name is None]
    named = sorted(
        (p for p in policies if p.name is not None),
        key=lambda p: p.name,
        reverse=is_descending(order),
    )
    return unnamed + named
