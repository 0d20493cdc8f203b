import json

import pytest
from pydantic import ValidationError

from txwhisperer import detect
from txwhisperer.config import settings
from txwhisperer.contamination import table as table_module
from txwhisperer.contamination.table import (
    get_flagged_table,
    load_flagged_table,
    reset_flagged_table,
)
from txwhisperer.models.chain import Chain, InputKind


@pytest.fixture(autouse=True)
def fresh_table():
    reset_flagged_table()
    yield
    reset_flagged_table()


def _write_table(path, entries):
    path.write_text(
        json.dumps(
            {
                "version": "2.0.0",
                "last_updated": "2025-06-01",
                "entries": entries,
            }
        )
    )
    return path


class TestPackagedTable:
    def test_loads(self):
        table = load_flagged_table(settings.flagged_table_file)
        assert table.version == "1.0.0"
        assert len(table.entries) > 0
        assert "DEMO" in table.disclaimer

    def test_info(self):
        table = load_flagged_table(settings.flagged_table_file)
        info = table.info()
        assert info.entry_count == len(table.entries)
        assert info.last_updated

    def test_entries_match_their_own_labels(self):
        table = load_flagged_table(settings.flagged_table_file)
        for entry in table.entries:
            assert detect(entry.value) == (entry.chain, entry.kind), entry.value


class TestLoadFlaggedTable:
    def test_custom_file(self, tmp_path):
        path = _write_table(
            tmp_path / "table.json",
            [
                {
                    "value": "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa",
                    "chain": "bitcoin",
                    "kind": "address",
                    "label": "x",
                    "source": "y",
                }
            ],
        )
        table = load_flagged_table(path)
        assert table.version == "2.0.0"
        assert table.entries[0].chain is Chain.BITCOIN
        assert table.entries[0].kind is InputKind.ADDRESS

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_flagged_table(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError):
            load_flagged_table(path)

    def test_unknown_chain_label(self, tmp_path):
        path = _write_table(
            tmp_path / "table.json",
            [{"value": "x", "chain": "dogecoin", "kind": "address", "label": "x", "source": "y"}],
        )
        with pytest.raises(ValidationError):
            load_flagged_table(path)


class TestGetFlaggedTable:
    def test_cached(self):
        assert get_flagged_table() is get_flagged_table()

    def test_configured_path(self, tmp_path, monkeypatch):
        path = _write_table(tmp_path / "table.json", [])
        monkeypatch.setattr(settings, "flagged_table_path", str(path))
        assert get_flagged_table().version == "2.0.0"

    def test_reset(self):
        first = get_flagged_table()
        reset_flagged_table()
        assert table_module._table is None
        assert get_flagged_table() is not first
