from .candidate import (
    CandidateFilters,
    CandidateCard,
    CandidateListData,
    CandidateStats,
    BreakdownItem,
    CandidateDetail,
    ShareLinks,
)

__all__ = [
    "CandidateFilters",
    "CandidateCard",
    "CandidateListData",
    "CandidateStats",
    "BreakdownItem",
    "CandidateDetail",
    "ShareLinks",
]
