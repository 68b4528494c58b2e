import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
from fastapi import Request
from loguru import logger
from pydantic import ValidationError

from src.config import DATA_SOURCE, DATA_SOURCE_TIMEOUT
from src.database.models import CandidateRecord


class DataSourceError(Exception):
    """Raised when the candidate dataset cannot be read or parsed."""


class Dataset:
    """ Read-only candidate collection loaded once per process."""

    def __init__(self, candidates: Optional[List[CandidateRecord]] = None, load_error: Optional[str] = None):
        self._candidates = tuple(candidates or ())
        self._by_id = {c.id: c for c in self._candidates}
        self.load_error = load_error

        # Aggregates are computed once per load
        self.count = len(self._candidates)
        total_assets = sum((c.assets_inr or 0) for c in self._candidates)
        self.average_assets = (total_assets / self.count) if self.count else 0.0

    @property
    def candidates(self) -> List[CandidateRecord]:
        return list(self._candidates)

    def get(self, candidate_id: int) -> Optional[CandidateRecord]:
        return self._by_id.get(candidate_id)

    def __contains__(self, candidate_id: int) -> bool:
        return candidate_id in self._by_id

    def __len__(self) -> int:
        return self.count

    def stats(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "average_assets": self.average_assets,
            "load_error": self.load_error,
        }

    @classmethod
    def from_records(cls, rows: List[Any]) -> "Dataset":
        """Validate raw rows, skipping unusable records and duplicate ids."""
        candidates: List[CandidateRecord] = []
        seen = set()
        for index, row in enumerate(rows):
            if not isinstance(row, dict):
                logger.warning(f"Skipping record #{index}: not an object")
                continue
            try:
                candidate = CandidateRecord.model_validate(row)
            except ValidationError as e:
                logger.warning(f"Skipping record #{index}: {e.error_count()} validation error(s)")
                continue
            if candidate.id in seen:
                logger.warning(f"Skipping record #{index}: duplicate id {candidate.id}")
                continue
            seen.add(candidate.id)
            candidates.append(candidate)
        return cls(candidates)


def read_source(source: str, timeout: float = DATA_SOURCE_TIMEOUT) -> Any:
    """Read the raw JSON payload from a file path or an http(s) URL."""
    try:
        if source.startswith(("http://", "https://")):
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            return response.json()
        with Path(source).open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError, requests.RequestException) as e:
        raise DataSourceError(f"Could not read candidate data from {source}: {e}") from e


def load_dataset(source: str = DATA_SOURCE) -> Dataset:
    """Load the dataset once. Failures leave an empty collection, no retry."""
    logger.info(f"Loading candidate data from {source}")
    try:
        payload = read_source(source)
        if not isinstance(payload, list):
            raise DataSourceError(f"Candidate data at {source} is not a JSON array")
    except DataSourceError as e:
        logger.error(f"Error loading candidate data: {e}")
        return Dataset(load_error=str(e))

    dataset = Dataset.from_records(payload)
    logger.info(f"Loaded {dataset.count} candidate(s)")
    return dataset


def get_dataset(request: Request) -> Dataset:
    """ Returns the dataset loaded at startup, or an empty one before load."""
    dataset = getattr(request.app.state, "dataset", None)
    if dataset is None:
        return Dataset(load_error="Candidate data has not been loaded.")
    return dataset
