"""
Unit tests for the recent-activity merge — pure function, no DB.
"""
from datetime import date

from rental_manager.schemas.dashboard import ActivityItem
from rental_manager.services.dashboard import RECENT_ACTIVITY_LIMIT, merge_recent_activity


def _item(kind: str, when: date | None, title: str = "x") -> ActivityItem:
    return ActivityItem(type=kind, title=title, amount=10.0, date=when)


class TestMergeRecentActivity:
    def test_sorted_newest_first(self):
        items = [
            _item("expense", date(2024, 1, 5)),
            _item("invoice", date(2024, 3, 1)),
            _item("expense", date(2024, 2, 10)),
        ]
        merged = merge_recent_activity(items)
        assert [i.date for i in merged] == [date(2024, 3, 1), date(2024, 2, 10), date(2024, 1, 5)]

    def test_truncated_to_limit(self):
        items = [_item("expense", date(2024, 1, d)) for d in range(1, 6)]
        items += [_item("invoice", date(2024, 2, d)) for d in range(1, 6)]
        merged = merge_recent_activity(items)
        assert len(merged) == RECENT_ACTIVITY_LIMIT == 5
        assert all(i.type == "invoice" for i in merged)

    def test_undated_entries_sort_last(self):
        items = [
            _item("invoice", None, title="undated"),
            _item("expense", date(2023, 6, 1)),
            _item("invoice", date(2024, 6, 1)),
        ]
        merged = merge_recent_activity(items)
        assert [i.title for i in merged][-1] == "undated"
        assert merged[0].date == date(2024, 6, 1)

    def test_undated_dropped_first_when_over_limit(self):
        items = [_item("invoice", None, title="undated")]
        items += [_item("expense", date(2024, 1, d)) for d in range(1, 6)]
        merged = merge_recent_activity(items)
        assert "undated" not in [i.title for i in merged]

    def test_empty(self):
        assert merge_recent_activity([]) == []
