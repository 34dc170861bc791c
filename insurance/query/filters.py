"""
Predicate filters — pure, order-preserving narrowing functions.

Each filter takes a sequence of policies and one criterion and returns a new
list holding the surviving policies in their original relative order.
Records whose filtered field is absent never survive.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..catalog.store import Policy


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def by_premium_range(policies: Sequence[Policy], min_premium: int, max_premium: int) -> List[Policy]:
    return [
        p for p in policies
        if p.premium is not None and min_premium <= p.premium <= max_premium
    ]


def by_type(policies: Sequence[Policy], policy_type: str) -> List[Policy]:
    wanted = policy_type.lower()
    return [p for p in policies if p.type is not None and p.type.lower() == wanted]


def by_min_coverage(policies: Sequence[Policy], min_coverage: int) -> List[Policy]:
    return [p for p in policies if p.coverage is not None and p.coverage >= min_coverage]


def by_name(policies: Sequence[Policy], term: Optional[str]) -> List[Policy]:
    """Case-insensitive substring match on name. A missing or blank term matches nothing."""
    if is_blank(term):
        return []
    needle = term.lower()
    return [p for p in policies if p.name is not None and needle in p.name.lower()]
