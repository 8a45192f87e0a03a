"""Tests for aggregation over work logs."""

from datetime import date

import pytest

from teamlog.services.aggregation import (
    average_mood,
    completed_tasks,
    daily_series,
    developer_day_summary,
    developer_rollups,
    group_by_month,
    month_groups,
    team_series,
    team_snapshot,
    top_tags,
    total_log_time,
    total_tasks,
    total_time,
    unique_tags,
)
from teamlog.utils.formatting import format_time


class TestScalars:
    def test_total_time_is_sum(self, make_task):
        tasks = [make_task("a", time_spent=120), make_task("b", time_spent=45), make_task("c", time_spent=30)]
        assert total_time(tasks) == 195
        assert format_time(total_time(tasks)) == "3h 15m"

    def test_total_time_empty(self):
        assert total_time([]) == 0

    def test_totals_over_logs(self, seeded_logs):
        assert total_log_time(seeded_logs) == 3 * 195
        assert total_tasks(seeded_logs) == 9
        assert completed_tasks(seeded_logs) == 9

    def test_average_mood(self, seeded_logs):
        assert average_mood(seeded_logs) == pytest.approx(4.0)

    def test_average_mood_over_nothing_is_none(self):
        assert average_mood([]) is None
        assert average_mood(iter([])) is None


class TestMonthGrouping:
    @pytest.fixture
    def logs(self, make_log):
        return [
            make_log("a", day=date(2026, 8, 3)),
            make_log("b", day=date(2026, 10, 1)),
            make_log("c", day=date(2025, 12, 31)),
            make_log("d", day=date(2026, 10, 15)),
            make_log("e", day=date(2026, 8, 20)),
        ]

    def test_groups_newest_month_first(self, logs):
        groups = month_groups(logs)
        assert [(g.year, g.month) for g in groups] == [(2026, 10), (2026, 8), (2025, 12)]

    def test_logs_newest_first_within_group(self, logs):
        groups = month_groups(logs)
        assert [log.id for log in groups[0].logs] == ["d", "b"]
        assert [log.id for log in groups[1].logs] == ["e", "a"]

    def test_group_by_month_labels(self, logs):
        grouped = group_by_month(logs)
        assert list(grouped) == ["October 2026", "August 2026", "December 2025"]

    def test_empty(self):
        assert group_by_month([]) == {}


class TestDeveloperRollups:
    def test_one_rollup_per_developer(self, seeded_logs, users):
        rollups = developer_rollups(seeded_logs, [users["1"], users["3"]])

        john, alex = rollups
        assert john.developer.name == "John Developer"
        assert len(john.logs) == 2
        assert john.total_minutes == 390
        assert john.task_count == 6
        assert john.average_mood == pytest.approx(4.5)
        assert john.blocker_count == 1
        assert alex.average_mood == pytest.approx(3.0)

    def test_developer_without_logs(self, users):
        (rollup,) = developer_rollups([], [users["1"]])
        assert rollup.total_minutes == 0
        assert rollup.average_mood is None


class TestTags:
    def test_unique_first_seen_order(self, make_log, make_task):
        log = make_log(
            tasks=[make_task("a", tags=["ui", "auth"]), make_task("b", tags=["auth", "api"])]
        )
        assert unique_tags(log) == ["ui", "auth", "api"]

    def test_top_tags_overflow(self, make_log, make_task):
        log = make_log(tasks=[make_task("a", tags=[f"t{i}" for i in range(7)])])
        summary = top_tags(log)
        assert summary.shown == ["t0", "t1", "t2", "t3", "t4"]
        assert summary.hidden == 2

    def test_top_tags_under_limit(self, seeded_logs):
        summary = top_tags(seeded_logs[0])
        assert summary.shown == ["frontend", "auth", "bugfix", "ui", "review"]
        assert summary.hidden == 0


class TestSeries:
    def test_daily_series_ascending(self, seeded_logs):
        points = daily_series(reversed(seeded_logs))
        assert [p.day for p in points] == sorted(p.day for p in points)
        assert points[0].hours == pytest.approx(3.25)
        assert points[0].label == "Sat, Oct 17"
        assert points[0].mood == 4

    def test_team_series_fills_missing_days_with_zero(self, seeded_logs, users):
        series = team_series(seeded_logs, [users["1"], users["3"]])
        assert series.days == [date(2026, 10, 17), date(2026, 10, 18)]
        assert series.labels == ["Sat, Oct 17", "Sun, Oct 18"]
        assert series.hours_by_developer["John Developer"] == [3.25, 3.25]
        assert series.hours_by_developer["Alex Developer"] == [0.0, 3.25]


class TestDashboards:
    def test_team_snapshot(self, seeded_logs, users, today):
        snapshot = team_snapshot(seeded_logs, [users["1"], users["3"]], today=today)
        assert snapshot.developer_count == 2
        assert snapshot.logged_today == 2
        assert [log.id for log in snapshot.logs_with_blockers] == ["1", "3"]
        assert [log.id for log in snapshot.unreviewed] == ["2", "3"]
        assert snapshot.recent_minutes == 3 * 195

    def test_developer_day(self, seeded_logs, today):
        johns = [log for log in seeded_logs if log.user_id == "1"]
        summary = developer_day_summary(johns, today=today)
        assert summary.today_log.id == "2"
        assert summary.minutes_today == 195
        assert summary.tasks_today == 3
        assert summary.completed_today == 3
        assert summary.has_blockers_today is False
        assert summary.recent_minutes == 390

    def test_developer_day_without_log(self, today):
        summary = developer_day_summary([], today=today)
        assert summary.today_log is None
        assert summary.minutes_today == 0
        assert summary.recent_minutes == 0
