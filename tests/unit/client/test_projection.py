"""Unit tests for the search/filter/sort projection"""
import pytest
from datetime import datetime, timedelta, timezone
from src.client.models import ProjectRecord
from src.client.projection import (
    collation_key,
    created_timestamp,
    filter_projects,
    project_view,
    sort_projects,
)

BASE = datetime(2024, 6, 1, 12, 0, 0)


def _record(name, description="", status="active", created_at=None, record_id=None):
    return ProjectRecord(
        id=record_id or name.lower(),
        name=name,
        description=description,
        status=status,
        created_at=created_at,
    )


@pytest.fixture
def records():
    return [
        _record("Website redesign", "New landing page", "active", BASE),
        _record("Mobile app", "iOS and Android CLIENT", "on-hold", BASE + timedelta(days=2)),
        _record("Data migration", "Move to Postgres", "completed", BASE - timedelta(days=5)),
        _record("Été campaign", "Summer marketing", "active", BASE + timedelta(days=1)),
    ]


class TestFilterProjects:
    """Test search term and status filtering"""

    def test_empty_search_and_all_keeps_every_record(self, records):
        result = filter_projects(records, "", "all")
        assert {r.id for r in result} == {r.id for r in records}
        assert len(result) == len(records)

    def test_search_matches_name_case_insensitively(self, records):
        result = filter_projects(records, "WEBSITE")
        assert [r.name for r in result] == ["Website redesign"]

    def test_search_matches_description(self, records):
        result = filter_projects(records, "client")
        assert [r.name for r in result] == ["Mobile app"]

    def test_search_without_match_returns_nothing(self, records):
        assert filter_projects(records, "kubernetes") == []

    def test_status_filter(self, records):
        result = filter_projects(records, "", "active")
        assert {r.name for r in result} == {"Website redesign", "Été campaign"}

    def test_on_hold_status_filter(self, records):
        result = filter_projects(records, "", "on-hold")
        assert [r.name for r in result] == ["Mobile app"]

    def test_search_and_status_are_combined(self, records):
        assert filter_projects(records, "mobile", "active") == []

    def test_missing_description_is_not_an_error(self):
        record = ProjectRecord(id="x", name="Alpha", description=None, status="active")
        assert filter_projects([record], "beta") == []
        assert filter_projects([record], "alp") == [record]

    def test_unknown_status_filter_rejected(self, records):
        with pytest.raises(ValueError):
            filter_projects(records, "", "archived")

    def test_input_not_mutated(self, records):
        before = list(records)
        filter_projects(records, "a", "active")
        assert records == before


class TestSortProjects:
    """Test the four orderings"""

    def test_date_desc_newest_first(self, records):
        result = sort_projects(records, "date-desc")
        assert [r.name for r in result] == [
            "Mobile app",
            "Été campaign",
            "Website redesign",
            "Data migration",
        ]

    def test_date_asc_oldest_first(self, records):
        result = sort_projects(records, "date-asc")
        assert [r.name for r in result] == [
            "Data migration",
            "Website redesign",
            "Été campaign",
            "Mobile app",
        ]

    def test_missing_timestamp_sorts_as_epoch(self, records):
        undated = _record("Undated", created_at=None)
        result = sort_projects(records + [undated], "date-asc")
        assert result[0] is undated
        assert sort_projects(records + [undated], "date-desc")[-1] is undated

    def test_invalid_timestamp_sorts_as_epoch(self):
        broken = ProjectRecord.model_validate(
            {"id": "b", "name": "Broken", "status": "active", "createdAt": "not-a-date"}
        )
        dated = _record("Dated", created_at=BASE)
        assert broken.created_at is None
        assert sort_projects([dated, broken], "date-asc") == [broken, dated]

    def test_aware_and_naive_timestamps_compare(self):
        naive = _record("Naive", created_at=datetime(2024, 1, 1, 10, 0))
        aware = _record("Aware", created_at=datetime(2024, 1, 1, 11, 0, tzinfo=timezone.utc))
        assert [r.name for r in sort_projects([aware, naive], "date-asc")] == ["Naive", "Aware"]

    def test_name_asc_ignores_accents_and_case(self, records):
        result = sort_projects(records, "name-asc")
        assert [r.name for r in result] == [
            "Data migration",
            "Été campaign",
            "Mobile app",
            "Website redesign",
        ]

    def test_name_desc_is_reverse_of_name_asc(self, records):
        ascending = sort_projects(records, "name-asc")
        descending = sort_projects(records, "name-desc")
        assert descending == list(reversed(ascending))

    def test_lowercase_name_sorts_with_uppercase(self):
        result = sort_projects([_record("beta"), _record("Alpha"), _record("Gamma")], "name-asc")
        assert [r.name for r in result] == ["Alpha", "beta", "Gamma"]

    def test_equal_keys_keep_input_order(self):
        first = _record("Same", record_id="1", created_at=BASE)
        second = _record("Same", record_id="2", created_at=BASE)
        assert sort_projects([first, second], "date-desc") == [first, second]
        assert sort_projects([first, second], "name-asc") == [first, second]

    def test_unknown_sort_key_rejected(self, records):
        with pytest.raises(ValueError):
            sort_projects(records, "priority")


class TestProjectView:
    """Test the combined projection"""

    def test_defaults_are_everything_newest_first(self, records):
        result = project_view(records)
        assert [r.name for r in result] == [r.name for r in sort_projects(records, "date-desc")]

    def test_is_idempotent(self, records):
        once = project_view(records, "a", "active", "name-asc")
        twice = project_view(once, "a", "active", "name-asc")
        assert once == twice

    def test_filter_then_sort(self, records):
        result = project_view(records, "", "active", "name-desc")
        assert [r.name for r in result] == ["Website redesign", "Été campaign"]


def test_collation_key_folds_accents():
    assert collation_key("Été")[0] == collation_key("ete")[0]
    assert collation_key("Été") != collation_key("ete")


def test_created_timestamp_accepts_iso_string():
    class Loose:
        created_at = "1970-01-01T00:00:10Z"

    assert created_timestamp(Loose()) == 10.0
