"""Tests for the demo data set."""

from datetime import date

from teamlog.infrastructure.seed import demo_logs, demo_users
from teamlog.models import Mood, Role


class TestDemoData:
    def test_users(self):
        users = demo_users()
        assert [(u.id, u.name, u.role) for u in users] == [
            ("1", "John Developer", Role.DEVELOPER),
            ("2", "Jane Manager", Role.MANAGER),
            ("3", "Alex Developer", Role.DEVELOPER),
        ]
        assert {u.team_id for u in users} == {"1"}

    def test_logs_are_relative_to_today(self):
        logs = demo_logs(date(2026, 10, 18))
        assert [log.date for log in logs] == [
            date(2026, 10, 17),
            date(2026, 10, 18),
            date(2026, 10, 18),
        ]

    def test_log_contents(self):
        first, second, third = demo_logs(date(2026, 10, 18))
        assert first.reviewed and first.reviewed_by == "2"
        assert first.review_notes == "Great job on the login functionality!"
        assert (first.mood, second.mood, third.mood) == (Mood.GOOD, Mood.EXCELLENT, Mood.NEUTRAL)
        assert not second.reviewed and second.blockers is None
        assert third.blockers == "API integration issues"
        assert all(log.total_time == 195 for log in (first, second, third))

    def test_task_ids_unique_across_logs(self):
        ids = [t.id for log in demo_logs() for t in log.tasks]
        assert len(ids) == len(set(ids))
