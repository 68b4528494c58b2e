import math
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field, field_validator

# ----------------------
# Lenient coercion helpers
# Malformed optional values are treated as absent, never raised.
# ----------------------

def to_amount(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").replace("₹", "").strip()
        if not value:
            return None
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(amount) or amount < 0:
        return None
    return int(round(amount))


def to_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


class MovableAssets(BaseModel):
    cash: Optional[int] = None
    bank_deposits: Optional[int] = None
    bonds_shares: Optional[int] = None
    vehicles: Optional[int] = None
    jewellery: Optional[int] = None

    @field_validator("*", mode="before")
    @classmethod
    def _amount(cls, v):
        return to_amount(v)


class ImmovableAssets(BaseModel):
    agricultural_land: Optional[int] = None
    non_agricultural_land: Optional[int] = None
    commercial_buildings: Optional[int] = None
    residential_buildings: Optional[int] = None

    @field_validator("*", mode="before")
    @classmethod
    def _amount(cls, v):
        return to_amount(v)


class CriminalCaseDetail(BaseModel):
    case_number: Optional[Union[int, str]] = None
    charge: Optional[str] = None

    @field_validator("case_number", mode="before")
    @classmethod
    def _case_number(cls, v):
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        return to_text(v)

    @field_validator("charge", mode="before")
    @classmethod
    def _charge(cls, v):
        return to_text(v)


class ItrDetails(BaseModel):
    labels: List[str] = []
    income: List[Optional[int]] = []

    @field_validator("labels", mode="before")
    @classmethod
    def _labels(cls, v):
        if not isinstance(v, list):
            return []
        return [to_text(x) or "" for x in v]

    @field_validator("income", mode="before")
    @classmethod
    def _income(cls, v):
        if not isinstance(v, list):
            return []
        return [to_amount(x) for x in v]


class CandidateRecord(BaseModel):
    """One candidate affidavit as loaded from the static dataset."""

    id: int
    name: str
    party: str
    constituency: Optional[str] = None
    profession: Optional[str] = None
    education: Optional[str] = None
    assets_inr: Optional[int] = None
    liabilities_inr: Optional[int] = None
    criminal_cases: int = 0
    photo_url: Optional[str] = None
    myneta_url: Optional[str] = None
    plain_language_summary: Optional[str] = Field(None, alias="plainLanguageSummary")
    movable_assets: Optional[MovableAssets] = None
    immovable_assets: Optional[ImmovableAssets] = None
    criminal_case_details: Optional[List[CriminalCaseDetail]] = None
    itr_details: Optional[ItrDetails] = None

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        if isinstance(v, bool):
            raise ValueError("id must be an integer")
        return v

    @field_validator("name", "party", mode="before")
    @classmethod
    def _required_text(cls, v):
        text = to_text(v)
        if text is None:
            raise ValueError("must be a non-empty string")
        return text

    @field_validator(
        "constituency", "profession", "education",
        "photo_url", "myneta_url", "plain_language_summary",
        mode="before",
    )
    @classmethod
    def _optional_text(cls, v):
        return to_text(v)

    @field_validator("assets_inr", "liabilities_inr", mode="before")
    @classmethod
    def _amounts(cls, v):
        return to_amount(v)

    @field_validator("criminal_cases", mode="before")
    @classmethod
    def _criminal_cases(cls, v):
        return to_amount(v) or 0

    @field_validator("movable_assets", "immovable_assets", "itr_details", mode="before")
    @classmethod
    def _mapping(cls, v):
        return v if isinstance(v, dict) else None

    @field_validator("criminal_case_details", mode="before")
    @classmethod
    def _case_list(cls, v):
        if not isinstance(v, list):
            return None
        return [item for item in v if isinstance(item, dict)]
