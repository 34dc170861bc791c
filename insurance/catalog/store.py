"""
Catalog Store — the immutable, in-process sequence of policy records.

The catalog is built once at startup (see load_catalog) and handed to the
QueryEngine. Nothing on the query path mutates it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Policy:
    id: int
    name: Optional[str] = None
    type: Optional[str] = None
    premium: Optional[int] = None
    coverage: Optional[int] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Policy":
        if not isinstance(raw, dict):
            raise TypeError(f"policy entry must be an object, got {type(raw).__name__}")
        return cls(
            id=int(raw["id"]),
            name=_opt_str(raw.get("name")),
            type=_opt_str(raw.get("type")),
            premium=_opt_int(raw.get("premium")),
            coverage=_opt_int(raw.get("coverage")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _opt_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _opt_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class CatalogStore:
    """
    Holds the catalog snapshot in load order.

    Usage:
        store = CatalogStore([Policy(1, "Home Basic", "home", 100, 50000)])
        store.all()   # -> (Policy(...),)
    """

    def __init__(self, policies: Iterable[Policy] = ()):
        self._policies: Tuple[Policy, ...] = tuple(policies)

    def all(self) -> Tuple[Policy, ...]:
        return self._policies

    def __len__(self) -> int:
        return len(self._policies)


def load_catalog(path: Path) -> CatalogStore:
    """
    Read a JSON array of policy objects from *path*.

    Any failure leaves the service with an empty catalog rather than
    aborting startup.
    """
    logger.info("Loading policies from %s", path)
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise TypeError(f"expected a JSON array, got {type(raw).__name__}")
        policies = [Policy.from_dict(entry) for entry in raw]
    except Exception:
        logger.error("Error loading policies from %s", path, exc_info=True)
        return CatalogStore()

    logger.info("Loaded %d policies", len(policies))
    return CatalogStore(policies)
