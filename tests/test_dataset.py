"""
Tests for loading and validating the candidate dataset.
"""

import json
from types import SimpleNamespace

import pytest
import requests

from src.database import Dataset, DataSourceError, get_dataset, load_dataset, read_source
from src.database import dataset as dataset_module
from src.database.models import CandidateRecord


class TestCandidateRecord:
    """Lenient record validation."""

    def test_summary_alias(self):
        record = CandidateRecord.model_validate({"id": 1, "name": "A", "party": "X", "plainLanguageSummary": "Hi"})
        assert record.plain_language_summary == "Hi"

    def test_malformed_optional_fields_are_absent(self):
        record = CandidateRecord.model_validate({
            "id": "7",
            "name": "  A  ",
            "party": "X",
            "assets_inr": "not a number",
            "liabilities_inr": -10,
            "criminal_cases": "many",
            "education": {"level": "?"},
            "constituency": "",
            "movable_assets": "n/a",
            "criminal_case_details": [{"charge": "Theft"}, "junk"],
            "itr_details": {"labels": ["2021-22"], "income": ["12,00,000"]},
        })
        assert record.id == 7
        assert record.name == "A"
        assert record.assets_inr is None
        assert record.liabilities_inr is None
        assert record.criminal_cases == 0
        assert record.education is None
        assert record.constituency is None
        assert record.movable_assets is None
        assert [d.charge for d in record.criminal_case_details] == ["Theft"]
        assert record.itr_details.income == [1200000]

    @pytest.mark.parametrize("value", ["inf", "-inf", "nan", float("inf"), float("nan"), 10**400, "1e400"])
    def test_non_finite_or_overflowing_amounts_are_absent(self, value):
        record = CandidateRecord.model_validate({
            "id": 1, "name": "A", "party": "X",
            "assets_inr": value, "liabilities_inr": value, "criminal_cases": value,
        })
        assert record.assets_inr is None
        assert record.liabilities_inr is None
        assert record.criminal_cases == 0

    def test_amount_strings_with_commas(self):
        record = CandidateRecord.model_validate({"id": 1, "name": "A", "party": "X", "assets_inr": "₹1,00,000"})
        assert record.assets_inr == 100000


class TestFromRecords:
    """Building a dataset from raw rows."""

    def test_skips_unusable_rows(self):
        rows = [
            {"id": 1, "name": "A", "party": "X"},
            {"id": 2, "party": "X"},
            {"id": 3, "name": "C", "party": "   "},
            {"id": True, "name": "D", "party": "X"},
            {"name": "E", "party": "X"},
            "not an object",
            {"id": 6, "name": "F", "party": "Y"},
        ]
        dataset = Dataset.from_records(rows)
        assert [c.id for c in dataset.candidates] == [1, 6]

    def test_duplicate_ids_keep_first(self):
        rows = [
            {"id": 1, "name": "First", "party": "X"},
            {"id": 1, "name": "Second", "party": "X"},
        ]
        dataset = Dataset.from_records(rows)
        assert [c.name for c in dataset.candidates] == ["First"]

    def test_stats(self, dataset):
        assert dataset.count == 5
        assert dataset.average_assets == 17540000
        assert dataset.stats() == {"count": 5, "average_assets": 17540000, "load_error": None}

    def test_empty_stats(self):
        assert Dataset().stats() == {"count": 0, "average_assets": 0.0, "load_error": None}

    def test_lookup(self, dataset):
        assert dataset.get(2).name == "Sunita Devi"
        assert dataset.get(999) is None
        assert 3 in dataset
        assert len(dataset) == 5

    def test_candidates_is_a_copy(self, dataset):
        dataset.candidates.clear()
        assert dataset.count == len(dataset.candidates) == 5


class TestLoadDataset:
    """Reading the dataset from a file or URL."""

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "candidates.json"
        path.write_text(json.dumps([{"id": 1, "name": "A", "party": "X", "assets_inr": 10}]), encoding="utf-8")
        dataset = load_dataset(str(path))
        assert dataset.count == 1
        assert dataset.load_error is None

    def test_missing_file_leaves_empty_collection(self, tmp_path):
        dataset = load_dataset(str(tmp_path / "missing.json"))
        assert dataset.count == 0
        assert "missing.json" in dataset.load_error

    def test_overflowing_amounts_do_not_abort_load(self, tmp_path):
        path = tmp_path / "candidates.json"
        path.write_text(
            "[" +
            '{"id": 1, "name": "A", "party": "X", "assets_inr": Infinity},' +
            '{"id": 2, "name": "B", "party": "X", "assets_inr": ' + str(10**400) + "}," +
            '{"id": 3, "name": "C", "party": "X", "liabilities_inr": "inf", "assets_inr": 30}' +
            "]",
            encoding="utf-8",
        )
        dataset = load_dataset(str(path))
        assert dataset.load_error is None
        assert [c.id for c in dataset.candidates] == [1, 2, 3]
        assert dataset.get(1).assets_inr is None
        assert dataset.get(2).assets_inr is None
        assert dataset.get(3).liabilities_inr is None
        assert dataset.average_assets == 10

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "candidates.json"
        path.write_text("{not json", encoding="utf-8")
        dataset = load_dataset(str(path))
        assert dataset.count == 0
        assert dataset.load_error

    def test_non_array_payload(self, tmp_path):
        path = tmp_path / "candidates.json"
        path.write_text(json.dumps({"candidates": []}), encoding="utf-8")
        dataset = load_dataset(str(path))
        assert dataset.count == 0
        assert "not a JSON array" in dataset.load_error

    def test_read_source_raises(self, tmp_path):
        with pytest.raises(DataSourceError):
            read_source(str(tmp_path / "missing.json"))

    def test_load_from_url(self, monkeypatch):
        calls = []

        class FakeResponse:
            def raise_for_status(self):
                pass

            def json(self):
                return [{"id": 1, "name": "A", "party": "X"}]

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse()

        monkeypatch.setattr(dataset_module.requests, "get", fake_get)
        dataset = load_dataset("https://example.org/candidates.json")
        assert dataset.count == 1
        assert calls[0][0] == "https://example.org/candidates.json"

    def test_url_failure_is_not_retried(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append(url)
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(dataset_module.requests, "get", fake_get)
        dataset = load_dataset("https://example.org/candidates.json")
        assert dataset.count == 0
        assert "offline" in dataset.load_error
        assert len(calls) == 1


def test_get_dataset_before_load():
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))
    dataset = get_dataset(request)
    assert dataset.count == 0
    assert dataset.load_error
