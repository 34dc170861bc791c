"""
/policies — paginated listing, name search, combined filter, policy types.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from ...api.schemas import PolicyOut, PolicyPageOut
from ...api.validation import check_request
from ...catalog.store import Policy
from ...errors import InvalidRequest
from ...query.sorter import DEFAULT_SORT_ORDER

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/policies",
    tags=["policies"],
    dependencies=[Depends(check_request)],
)


def _get_engine(request: Request):
    return request.app.state.engine


def _to_out(policies: List[Policy]) -> List[PolicyOut]:
    return [PolicyOut(**p.to_dict()) for p in policies]


def _opt_int_param(param: str, value: Optional[str]) -> Optional[int]:
    """An empty or blank value means the parameter was not supplied."""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise InvalidRequest(f"Invalid value for parameter(s): {param}") from None


@router.get("", response_model=PolicyPageOut, response_model_exclude_unset=True)
def list_policies(
    page: int = Query(default=0),
    size: int = Query(default=10),
    totalPagesRequired: bool = Query(default=False),
    name: Optional[str] = Query(default=None),
    engine=Depends(_get_engine),
):
    """
    One page of the catalog. With ``name`` the catalog is narrowed first and
    the narrowed count is always returned as ``totalPages``.
    """
    logger.info(
        "Fetching policies for page=%s, size=%s, totalPagesRequired=%s, name=%s",
        page, size, totalPagesRequired, name,
    )
    result = engine.list_policies(page, size, name=name, total_required=totalPagesRequired)
    fields = {"policies": _to_out(result.policies)}
    if result.total is not None:
        fields["totalPages"] = result.total
    return PolicyPageOut(**fields)


@router.get("/search", response_model=List[PolicyOut])
def search_policies(
    name: Optional[str] = Query(default=None),
    engine=Depends(_get_engine),
):
    logger.info("Searching policies by name=%s", name)
    return _to_out(engine.search_by_name(name))


@router.get("/filter", response_model=List[PolicyOut])
def filter_policies(
    minPremium: Optional[str] = Query(default=None),
    maxPremium: Optional[str] = Query(default=None),
    policyType: Optional[str] = Query(default=None),
    name: Optional[str] = Query(default=None),
    coverage: Optional[str] = Query(default=None, description="Minimum coverage"),
    sortOrder: str = Query(default=DEFAULT_SORT_ORDER, description="'desc' or anything else for ascending"),
    engine=Depends(_get_engine),
):
    logger.info(
        "Filtering policies with minPremium=%s, maxPremium=%s, policyType=%s, "
        "coverage=%s, sortOrder=%s, name=%s",
        minPremium, maxPremium, policyType, coverage, sortOrder, name,
    )
    return _to_out(engine.filter_policies(
        min_premium=_opt_int_param("minPremium", minPremium),
        max_premium=_opt_int_param("maxPremium", maxPremium),
        policy_type=policyType,
        min_coverage=_opt_int_param("coverage", coverage),
        sort_order=sortOrder,
        name=name,
    ))


@router.get("/getPolicyTypes", response_model=List[str])
def get_policy_types(engine=Depends(_get_engine)):
    logger.info("Fetching policy types")
    return engine.policy_types()
