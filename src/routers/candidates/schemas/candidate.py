from typing import List, Optional
from pydantic import BaseModel, Field
from src.database.models import CriminalCaseDetail, ItrDetails


class CandidateFilters(BaseModel):
    q: Optional[str] = Field(None, description="Search by name, party or constituency")
    party: str = Field("all", description="all | inc | bjp")
    sort_by: str = Field("relevance", description="relevance | assets_desc | assets_asc | name_asc")
    session_id: Optional[str] = Field(None, description="Comparison session for membership flags")


class CandidateCard(BaseModel):
    id: int
    name: str
    party: str
    party_class: str
    constituency: Optional[str] = None
    profession: Optional[str] = None
    education: Optional[str] = None
    assets_inr: Optional[int] = None
    liabilities_inr: Optional[int] = None
    assets_display: str
    liabilities_display: str
    criminal_cases: int
    has_criminal_cases: bool
    badges: List[str] = []
    photo_url: Optional[str] = None
    myneta_url: Optional[str] = None
    plain_language_summary: Optional[str] = None
    is_compared: bool = False


class CandidateListData(BaseModel):
    total: int
    visible: int
    load_error: Optional[str] = None
    items: List[CandidateCard]


class CandidateStats(BaseModel):
    count: int
    average_assets: float
    load_error: Optional[str] = None


class BreakdownItem(BaseModel):
    key: str
    label: str
    value: int
    display: str


class CandidateDetail(CandidateCard):
    movable_assets: List[BreakdownItem] = []
    immovable_assets: List[BreakdownItem] = []
    criminal_case_details: List[CriminalCaseDetail] = []
    itr_details: Optional[ItrDetails] = None


class ShareLinks(BaseModel):
    language: str
    text: str
    whatsapp: str
    x: str
    email: str
