# src/routers/candidates/controller.py
import unicodedata
from typing import Iterable, List, Optional
from src.database.models import CandidateRecord
from .schemas import CandidateFilters

# party filter group -> substring matched against the lower-cased party name
PARTY_GROUPS = {
    "inc": "congress",
    "bjp": "bjp",
}

SORT_KEYS = ("relevance", "assets_desc", "assets_asc", "name_asc")

HIGH_ASSETS_MULTIPLIER = 2
HIGH_CRIMINAL_CASES = 2

SEARCH_FIELDS = ("name", "party", "constituency")


def search_candidates(candidates: Iterable[CandidateRecord], search_text: Optional[str]) -> List[CandidateRecord]:
    """
    Keep candidates whose name, party or constituency contains the search text.
    Blank search text keeps everything.
    """
    q = (search_text or "").strip().lower()
    if not q:
        return list(candidates)
    result = []
    for candidate in candidates:
        values = (getattr(candidate, field) for field in SEARCH_FIELDS)
        if any(q in v.lower() for v in values if v):
            result.append(candidate)
    return result


def filter_by_party(candidates: Iterable[CandidateRecord], party: Optional[str]) -> List[CandidateRecord]:
    needle = PARTY_GROUPS.get((party or "all").strip().lower())
    if needle is None:
        # "all" and unknown groups pass through
        return list(candidates)
    return [c for c in candidates if needle in (c.party or "").lower()]


def name_sort_key(name: Optional[str]) -> str:
    """Accent- and case-insensitive collation key for candidate names."""
    decomposed = unicodedata.normalize("NFKD", name or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def sort_candidates(candidates: Iterable[CandidateRecord], sort_by: Optional[str]) -> List[CandidateRecord]:
    """Stable sort; equal keys keep their incoming relative order."""
    candidates = list(candidates)
    if sort_by == "assets_desc":
        return sorted(candidates, key=lambda c: c.assets_inr or 0, reverse=True)
    if sort_by == "assets_asc":
        return sorted(candidates, key=lambda c: c.assets_inr or 0)
    if sort_by == "name_asc":
        return sorted(candidates, key=lambda c: name_sort_key(c.name))
    # relevance and unknown keys keep the filtered order
    return candidates


def visible_candidates(candidates: Iterable[CandidateRecord], filters: CandidateFilters) -> List[CandidateRecord]:
    """Derive the visible list from the full collection and the current criteria."""
    result = search_candidates(candidates, filters.q)
    result = filter_by_party(result, filters.party)
    return sort_candidates(result, filters.sort_by)


def insight_badges(candidate: CandidateRecord, average_assets: float) -> List[str]:
    badges = []
    if (candidate.assets_inr or 0) > HIGH_ASSETS_MULTIPLIER * average_assets:
        badges.append("high_assets")
    if candidate.criminal_cases > HIGH_CRIMINAL_CASES:
        badges.append("high_criminal_cases")
    return badges


def party_class(party: Optional[str]) -> str:
    p = (party or "").lower()
    for group, needle in PARTY_GROUPS.items():
        if needle in p:
            return group
    return ""
