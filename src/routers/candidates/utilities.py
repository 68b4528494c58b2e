from typing import Any, Dict, List, Optional
from pydantic import BaseModel
from src.database.models import CandidateRecord
from src.utils.formatting import format_rupees, to_title
from .controller import insight_badges, party_class

# ----------------------
# Helpers
# ----------------------

def asset_breakdown(assets: Optional[BaseModel]) -> List[Dict[str, Any]]:
    """Positive entries of an asset map, labelled for a chart."""
    if assets is None:
        return []
    items = []
    for key, value in assets.model_dump().items():
        if isinstance(value, int) and value > 0:
            items.append({
                "key": key,
                "label": to_title(key),
                "value": value,
                "display": format_rupees(value),
            })
    return items


def _to_card(candidate: CandidateRecord, average_assets: float, is_compared: bool = False) -> Dict[str, Any]:
    return {
        "id": candidate.id,
        "name": candidate.name,
        "party": candidate.party,
        "party_class": party_class(candidate.party),
        "constituency": candidate.constituency,
        "profession": candidate.profession,
        "education": candidate.education,
        "assets_inr": candidate.assets_inr,
        "liabilities_inr": candidate.liabilities_inr,
        "assets_display": format_rupees(candidate.assets_inr),
        "liabilities_display": format_rupees(candidate.liabilities_inr),
        "criminal_cases": candidate.criminal_cases,
        "has_criminal_cases": candidate.criminal_cases > 0,
        "badges": insight_badges(candidate, average_assets),
        "photo_url": candidate.photo_url,
        "myneta_url": candidate.myneta_url,
        "plain_language_summary": candidate.plain_language_summary,
        "is_compared": is_compared,
    }


def _to_detail(candidate: CandidateRecord, average_assets: float, is_compared: bool = False) -> Dict[str, Any]:
    data = _to_card(candidate, average_assets, is_compared)
    data.update({
        "movable_assets": asset_breakdown(candidate.movable_assets),
        "immovable_assets": asset_breakdown(candidate.immovable_assets),
        "criminal_case_details": [d.model_dump() for d in (candidate.criminal_case_details or [])],
        "itr_details": candidate.itr_details.model_dump() if candidate.itr_details else None,
    })
    return data
