"""Tests for the WorkLog entity and draft materialization."""

from datetime import date, datetime

from teamlog.models import Mood, TaskDraft, WorkLogDraft
from teamlog.models.worklog import UPDATABLE_FIELDS, worklog_from_draft
from teamlog.services.log_queries import filter_logs


class TestWorkLog:
    def test_total_time_is_sum_of_tasks(self, make_log):
        log = make_log(minutes=(120, 45, 30))
        assert log.total_time == 195
        assert log.task_count == 3

    def test_total_time_of_no_tasks_is_zero(self, make_log):
        assert make_log(tasks=[]).total_time == 0

    def test_datetime_stored_as_day(self, make_log):
        log = make_log(day=datetime(2026, 10, 1, 9, 15))
        assert type(log.date) is date
        assert filter_logs([log], start_date=date(2026, 10, 1), end_date="2026-10-01") == [log]

    def test_date_and_mood_coerced(self, make_log):
        log = make_log(day="2026-10-01", mood=4)
        assert log.date == date(2026, 10, 1)
        assert log.mood is Mood.GOOD

    def test_completed_and_blockers(self, make_log, make_task):
        log = make_log(
            tasks=[make_task("a", completed=True), make_task("b")],
            blockers="Waiting on API",
        )
        assert log.completed_task_count == 1
        assert log.has_blockers
        assert not make_log(blockers="").has_blockers

    def test_copy_does_not_share_tasks(self, make_log):
        log = make_log(minutes=(10,))
        clone = log.copy()
        clone.tasks[0].tags.append("x")
        clone.tasks.append(clone.tasks[0])
        assert log.tasks[0].tags == []
        assert len(log.tasks) == 1


class TestFromDraft:
    def test_forces_unreviewed_and_assigns_ids(self):
        ids = iter(["task-a", "task-b"])
        draft = WorkLogDraft(
            user_id="1",
            date="2026-10-18",
            tasks=[TaskDraft(title="One", time_spent=5), TaskDraft(title="Two", tags=["x"])],
            mood=5,
        )
        log = worklog_from_draft(draft, "log-1", id_factory=lambda: next(ids))

        assert log.id == "log-1"
        assert log.reviewed is False
        assert [t.id for t in log.tasks] == ["task-a", "task-b"]
        assert log.tasks[1].tags == ["x"]
        assert log.tasks[1].tags is not draft.tasks[1].tags

    def test_id_is_not_updatable(self):
        assert "id" not in UPDATABLE_FIELDS
        assert {"date", "tasks", "reviewed", "review_notes"} <= UPDATABLE_FIELDS
