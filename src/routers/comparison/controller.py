# src/routers/comparison/controller.py
import time
import uuid
from typing import Any, Callable, Dict, List, Optional, Tuple
from loguru import logger
from src.config import COMPARE_LIMIT, COMPARE_SESSION_TTL, MIN_COMPARE
from src.database import Dataset
from src.routers.candidates.controller import party_class
from src.routers.locale.controller import get_translation
from src.utils.formatting import display, format_rupees


class ComparisonSet:
    """
    Ordered, duplicate-free set of candidate ids picked for side-by-side viewing.

    Adding beyond `limit` is a silent no-op.
    """

    def __init__(self, limit: int = COMPARE_LIMIT):
        self.limit = limit
        self._members: List[int] = []

    def toggle(self, candidate_id: int) -> bool:
        """Remove the id if present, otherwise append it when there is room.

        Returns whether the id is selected afterwards.
        """
        if candidate_id in self._members:
            self._members.remove(candidate_id)
            return False
        if len(self._members) < self.limit:
            self._members.append(candidate_id)
            return True
        logger.debug(f"Comparison full ({self.limit}); ignoring {candidate_id}")
        return False

    def clear(self) -> None:
        self._members.clear()

    def is_selected(self, candidate_id: int) -> bool:
        return candidate_id in self._members

    @property
    def members(self) -> List[int]:
        return list(self._members)

    @property
    def can_compare(self) -> bool:
        return len(self._members) >= MIN_COMPARE

    def __len__(self) -> int:
        return len(self._members)


class ComparisonSessions:
    """
    Session id -> ComparisonSet.

    Sets are dropped when their session ends, either explicitly or after
    `ttl` seconds without access.
    """

    def __init__(self, ttl: float = COMPARE_SESSION_TTL, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._sessions: Dict[str, Tuple[ComparisonSet, float]] = {}

    def _evict_idle(self) -> None:
        cutoff = self._clock() - self.ttl
        expired = [sid for sid, (_, last_access) in self._sessions.items() if last_access < cutoff]
        for session_id in expired:
            del self._sessions[session_id]
        if expired:
            logger.info(f"Discarded {len(expired)} idle comparison session(s)")

    def create(self) -> str:
        self._evict_idle()
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = (ComparisonSet(), self._clock())
        return session_id

    def get(self, session_id: Optional[str]) -> Optional[ComparisonSet]:
        self._evict_idle()
        if not session_id or session_id not in self._sessions:
            return None
        comparison, _ = self._sessions[session_id]
        self._sessions[session_id] = (comparison, self._clock())
        return comparison

    def end(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)


sessions = ComparisonSessions()


def get_sessions() -> ComparisonSessions:
    return sessions


def session_state(session_id: str, comparison: ComparisonSet) -> Dict[str, Any]:
    return {
        "session_id": session_id,
        "members": comparison.members,
        "size": len(comparison),
        "limit": comparison.limit,
        "can_compare": comparison.can_compare,
    }


# (row key, translation key, value getter)
COMPARISON_ROWS = (
    ("constituency", "constituency", lambda c: display(c.constituency)),
    ("profession", "profession", lambda c: display(c.profession)),
    ("assets", "assets", lambda c: format_rupees(c.assets_inr)),
    ("liabilities", "liabilities", lambda c: format_rupees(c.liabilities_inr)),
    ("criminal_cases", "criminal_cases", lambda c: c.criminal_cases),
    ("education", "education", lambda c: display(c.education)),
    ("affidavit", "affidavit", lambda c: display(c.myneta_url)),
)


def build_comparison_view(dataset: Dataset, comparison: ComparisonSet, language: str) -> Dict[str, Any]:
    """Side-by-side table for the selected candidates, in toggle order."""
    members = [dataset.get(i) for i in comparison.members[:COMPARE_LIMIT]]
    members = [m for m in members if m is not None]
    return {
        "title": get_translation(language, "compare_candidates"),
        "candidates": [
            {
                "id": c.id,
                "name": c.name,
                "party": c.party,
                "party_class": party_class(c.party),
                "photo_url": c.photo_url,
            }
            for c in members
        ],
        "rows": [
            {
                "key": key,
                "label": get_translation(language, label_key),
                "values": [getter(c) for c in members],
            }
            for key, label_key, getter in COMPARISON_ROWS
        ],
    }
