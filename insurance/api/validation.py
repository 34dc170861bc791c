"""
Request validation for everything under /policies.

Runs as a router-level dependency, so it executes before any handler touches
the catalog.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping

from fastapi import Request

from ..errors import InvalidRequest

logger = logging.getLogger(__name__)

POLICIES_PREFIX = "/policies"
FILTER_PATH = POLICIES_PREFIX + "/filter"
SEARCH_PATH = POLICIES_PREFIX + "/search"

# Optional sign and ASCII digits only; no surrounding whitespace.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        logger.warning("Pagination parameter not a number: %r", value)
        raise InvalidRequest("Page and size must be valid integers.")
    return int(value)


def validate_policy_request(path: str, params: Mapping[str, str]) -> None:
    """Raise InvalidRequest when *params* are not acceptable for *path*."""
    if not path.startswith(POLICIES_PREFIX):
        return

    if path.startswith(FILTER_PATH):
        if not params:
            logger.warning("Filter request with no parameters")
            raise InvalidRequest("At least one filter parameter must be provided.")
        return

    if path.startswith(SEARCH_PATH):
        return

    page = params.get("page")
    size = params.get("size")
    page_value = _parse_int(page) if page is not None else None
    size_value = _parse_int(size) if size is not None else None
    if (page_value is not None and page_value < 0) or (size_value is not None and size_value <= 0):
        logger.warning("Invalid pagination: page=%s, size=%s", page, size)
        raise InvalidRequest("Page must be >= 0 and size must be > 0.")

    logger.debug("Request to %s passed validation", path)


def check_request(request: Request) -> None:
    validate_policy_request(request.url.path, request.query_params)
