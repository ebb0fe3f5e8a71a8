"""Tests for JSON-file analysis persistence."""

import json
from datetime import datetime, timezone

from csvscope.models import Analysis, ColumnStatistics, ColumnType
from csvscope.store import AnalysisStore


def _analysis(name: str | None = "sample") -> Analysis:
    return Analysis(
        name=name,
        original_data="a\n1",
        number_of_rows=1,
        number_of_columns=1,
        total_characters=3,
        csv_token_count=2,
        markdown_token_count=9,
        column_statistics=(
            ColumnStatistics(
                column_name="a",
                null_count=0,
                unique_count=1,
                inferred_type=ColumnType.INTEGER,
                mean=1.0,
                median=1.0,
            ),
        ),
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


class TestAnalysisStore:
    def test_empty(self, store: AnalysisStore):
        assert store.find_all() == []
        assert store.find_by_id(1) is None
        assert not store.path.exists()

    def test_save_assigns_ids(self, store: AnalysisStore):
        first = store.save(_analysis())
        second = store.save(_analysis())
        assert (first.id, second.id) == (1, 2)

    def test_save_returns_copy(self, store: AnalysisStore):
        original = _analysis()
        stored = store.save(original)
        assert original.id is None
        assert stored.model_dump(exclude={"id"}) == original.model_dump(exclude={"id"})

    def test_round_trip(self, store: AnalysisStore):
        stored = store.save(_analysis())
        assert store.find_by_id(stored.id) == stored
        assert AnalysisStore(store.path).find_all() == [stored]

    def test_file_keeps_original_data(self, store: AnalysisStore):
        store.save(_analysis())
        raw = json.loads(store.path.read_text())
        assert raw["analyses"][0]["original_data"] == "a\n1"
        assert raw["next_id"] == 2

    def test_delete(self, store: AnalysisStore):
        stored = store.save(_analysis())
        assert store.delete(stored.id)
        assert store.find_by_id(stored.id) is None
        assert not store.delete(stored.id)

    def test_ids_not_reused(self, store: AnalysisStore):
        first = store.save(_analysis())
        store.delete(first.id)
        assert store.save(_analysis()).id == 2
