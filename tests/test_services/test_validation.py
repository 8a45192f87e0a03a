"""Tests for submission validation."""

from datetime import date

import pytest

from teamlog.domain.errors import WorkLogValidationError
from teamlog.models import Mood, TaskDraft, WorkLogDraft
from teamlog.services.validation import normalize_tags, parse_tag_input, validate_draft, validate_tasks


class TestTags:
    def test_normalize(self):
        assert normalize_tags([" ui ", "", "  ", "api"]) == ["ui", "api"]

    def test_parse_tag_input(self):
        assert parse_tag_input("frontend, auth, , ") == ["frontend", "auth"]


class TestValidateDraft:
    def test_valid_draft_is_normalized(self, make_draft):
        draft = make_draft(
            day="2026-10-18",
            tasks=[TaskDraft(title="  Fix bug ", time_spent=0, tags=[" ui", ""])],
            mood="4",
            blockers="   ",
        )
        result = validate_draft(draft)

        assert result.date == date(2026, 10, 18)
        assert result.mood is Mood.GOOD
        assert result.tasks[0].title == "Fix bug"
        assert result.tasks[0].tags == ["ui"]
        assert result.blockers is None

    def test_zero_tasks_rejected(self, make_draft):
        with pytest.raises(WorkLogValidationError) as exc_info:
            validate_draft(make_draft(tasks=[]))
        assert exc_info.value.problems == ["Please add at least one task"]

    def test_untitled_task_rejected(self, make_draft):
        draft = make_draft(tasks=[TaskDraft(title="ok"), TaskDraft(title="   ")])
        with pytest.raises(WorkLogValidationError) as exc_info:
            validate_draft(draft)
        assert exc_info.value.problems == ["Task 2 must have a title"]

    @pytest.mark.parametrize("spent", [-5, 1.5, "30", True])
    def test_bad_time_spent(self, make_draft, spent):
        with pytest.raises(WorkLogValidationError):
            validate_draft(make_draft(tasks=[TaskDraft(title="x", time_spent=spent)]))

    def test_all_problems_reported_together(self):
        draft = WorkLogDraft(user_id="", date="not-a-date", tasks=[], mood=0)
        with pytest.raises(WorkLogValidationError) as exc_info:
            validate_draft(draft)
        problems = exc_info.value.problems
        assert len(problems) == 4
        assert "Work log must have an owner" in problems
        assert "Please add at least one task" in problems

    def test_mood_out_of_range(self, make_draft):
        with pytest.raises(WorkLogValidationError):
            validate_draft(make_draft(mood=6))


class TestValidateTasks:
    def test_ok(self, make_task):
        validate_tasks([make_task()])

    def test_empty(self):
        with pytest.raises(WorkLogValidationError):
            validate_tasks([])
