"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from main import app
from src.database import Dataset, get_dataset
from src.database.models import CandidateRecord
from src.routers.comparison.controller import ComparisonSessions, get_sessions


def make_candidate(id: int, name: str, party: str = "Independent", **fields) -> CandidateRecord:
    return CandidateRecord(id=id, name=name, party=party, **fields)


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    """Raw candidate rows as they appear in the JSON dataset."""
    path = Path(__file__).resolve().parent.parent / "data" / "candidates.json"
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def dataset(sample_rows) -> Dataset:
    return Dataset.from_records(sample_rows)


@pytest.fixture
def abc_candidates() -> List[CandidateRecord]:
    """Alice / Bob / carol with assets 100 / 300 / 200."""
    return [
        make_candidate(1, "Alice", "Party X", assets_inr=100),
        make_candidate(2, "Bob", "Party X", assets_inr=300),
        make_candidate(3, "carol", "Party X", assets_inr=200),
    ]


@pytest.fixture
def sessions() -> ComparisonSessions:
    return ComparisonSessions()


@pytest.fixture
def client(dataset, sessions):
    """API client wired to the sample dataset and a fresh session registry."""
    app.dependency_overrides[get_dataset] = lambda: dataset
    app.dependency_overrides[get_sessions] = lambda: sessions
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def empty_client(sessions):
    """API client whose dataset failed to load."""
    failed = Dataset(load_error="Could not read candidate data from missing.json")
    app.dependency_overrides[get_dataset] = lambda: failed
    app.dependency_overrides[get_sessions] = lambda: sessions
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
