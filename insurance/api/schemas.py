"""
Pydantic schemas for the policy API.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class PolicyOut(BaseModel):
    id: int
    name: Optional[str] = None
    type: Optional[str] = None
    premium: Optional[int] = None
    coverage: Optional[int] = None


class PolicyPageOut(BaseModel):
    policies: List[PolicyOut]
    # Record count, not a page count; the key name is part of the public API.
    totalPages: Optional[int] = Field(default=None)


class HealthOut(BaseModel):
    status: str
    version: str
    policies: int
