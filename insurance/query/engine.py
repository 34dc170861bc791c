"""
Query Engine — orchestrates filters, sorting and pagination over the catalog.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..catalog.store import CatalogStore, Policy
from ..errors import InvalidRequest
from . import filters
from .sorter import DEFAULT_SORT_ORDER, sort_by_name

logger = logging.getLogger(__name__)


@dataclass
class PolicyPage:
    """One page of policies plus an optional record count.

    ``total`` is a count of records, not of pages, even though the HTTP
    layer publishes it as ``totalPages``.
    """
    policies: List[Policy]
    total: Optional[int] = None


def paginate(policies: Sequence[Policy], page: int, size: int) -> List[Policy]:
    """Return the half-open slice for *page*; pages past the end are empty."""
    if page < 0 or size <= 0:
        raise InvalidRequest("Page must be >= 0 and size must be > 0.")
    n = len(policies)
    start = min(page * size, n)
    end = min(start + size, n)
    logger.debug("Returning paginated policies from %d to %d", start, end)
    return list(policies[start:end])


class QueryEngine:
    """
    Read-only queries over a CatalogStore.

    Usage:
        engine = QueryEngine(store)
        engine.list_policies(page=0, size=10, total_required=True)
        engine.filter_policies(min_premium=100, max_premium=150, policy_type="home")
    """

    def __init__(self, store: CatalogStore):
        self._store = store

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_policies(
        self,
        page: int,
        size: int,
        name: Optional[str] = None,
        total_required: bool = False,
    ) -> PolicyPage:
        catalog = self._store.all()

        if filters.is_blank(name):
            result = PolicyPage(policies=paginate(catalog, page, size))
            if total_required:
                result.total = len(catalog)
            return result

        matching = filters.by_name(catalog, name)
        return PolicyPage(policies=paginate(matching, page, size), total=len(matching))

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_by_name(self, name: Optional[str]) -> List[Policy]:
        return filters.by_name(self._store.all(), name)

    # ------------------------------------------------------------------
    # Combined filter
    # ------------------------------------------------------------------

    def filter_policies(
        self,
        min_premium: Optional[int] = None,
        max_premium: Optional[int] = None,
        policy_type: Optional[str] = None,
        min_coverage: Optional[int] = None,
        sort_order: Optional[str] = DEFAULT_SORT_ORDER,
        name: Optional[str] = None,
    ) -> List[Policy]:
        """
        Sort the whole catalog by name, then narrow it stage by stage.

        Stages run in a fixed order (premium range, type, coverage, name) and
        stop as soon as one of them leaves nothing. The premium range only
        applies when both bounds are given.
        """
        result = sort_by_name(self._store.all(), sort_order)

        stages = []
        if min_premium is not None and max_premium is not None:
            stages.append(("premium", lambda ps: filters.by_premium_range(ps, min_premium, max_premium)))
        if not filters.is_blank(policy_type):
            stages.append(("type", lambda ps: filters.by_type(ps, policy_type)))
        if min_coverage is not None:
            stages.append(("coverage", lambda ps: filters.by_min_coverage(ps, min_coverage)))
        if not filters.is_blank(name):
            stages.append(("name", lambda ps: filters.by_name(ps, name)))

        for label, stage in stages:
            if not result:
                break
            result = stage(result)
            logger.debug("Filter stage %s left %d policies", label, len(result))

        return result

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def policy_types(self) -> List[str]:
        return sorted({p.type for p in self._store.all() if p.type is not None})
