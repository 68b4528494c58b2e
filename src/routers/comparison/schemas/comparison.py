from typing import Any, List, Optional
from pydantic import BaseModel


class ComparisonState(BaseModel):
    session_id: str
    members: List[int]
    size: int
    limit: int
    can_compare: bool


class ToggleResult(ComparisonState):
    candidate_id: int
    selected: bool
    accepted: bool


class ComparisonColumn(BaseModel):
    id: int
    name: str
    party: str
    party_class: str
    photo_url: Optional[str] = None


class ComparisonRow(BaseModel):
    key: str
    label: str
    values: List[Any]


class ComparisonView(BaseModel):
    title: str
    candidates: List[ComparisonColumn]
    rows: List[ComparisonRow]
