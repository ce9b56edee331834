# tests/test_seed_data.py
"""
Seed Data Tests - Unit Tests for the Reference Currency Dataset

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- devises.adapters.persistence.seed_data (load_reference_currencies, parse_currencies)
- pytest (testing framework)
"""
import json  # Build custom datasets

import pytest  # Testing framework for writing and running tests

from devises.adapters.persistence.seed_data import load_reference_currencies, parse_currencies


class TestBundledDataset:
    def test_bundled_dataset_loads(self):
        records = load_reference_currencies()
        codes = [record.code for record in records]

        assert len(records) == 33
        assert "USD" in codes and "EUR" in codes
        assert len(set(codes)) == len(codes)
        assert all(record.id is None for record in records)

    def test_custom_dataset_path(self, tmp_path):
        path = tmp_path / "currencies.json"
        path.write_text(json.dumps([{"code": "XAU", "name": "Gold"}]), encoding="utf-8")

        records = load_reference_currencies(path)

        assert [(r.code, r.name) for r in records] == [("XAU", "Gold")]


class TestParseCurrencies:
    def test_preserves_order_and_strips(self):
        records = parse_currencies('[{"code": " EUR ", "name": "Euro"}, {"code": "AUD", "name": "Australian Dollar"}]')
        assert [(r.code, r.name) for r in records] == [("EUR", "Euro"), ("AUD", "Australian Dollar")]

    def test_rejects_non_list(self):
        with pytest.raises(ValueError, match="must be a JSON list"):
            parse_currencies('{"code": "EUR"}')

    def test_rejects_missing_field(self):
        with pytest.raises(ValueError, match="Malformed currency entry at index 1"):
            parse_currencies('[{"code": "EUR", "name": "Euro"}, {"code": "USD"}]')

    def test_rejects_empty_values(self):
        with pytest.raises(ValueError, match="Empty code or name"):
            parse_currencies('[{"code": "", "name": "Euro"}]')
