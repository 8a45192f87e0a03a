"""Tests for the SQLAlchemy work log repository.

Uses an in-memory SQLite database to verify the same contract as the
in-memory store.
"""

from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from teamlog.domain.errors import WorkLogNotFound
from teamlog.domain.repositories import WorkLogRepository
from teamlog.infrastructure.repositories import SqlAlchemyWorkLogRepository
from teamlog.models import Mood, TaskDraft
from teamlog.models.base import Base
from teamlog.models.tables import TaskRow


@pytest.fixture
async def async_engine():
    """Create an in-memory async SQLite engine with all tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def async_session(async_engine):
    """Create an async session bound to the in-memory engine."""
    factory = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def repo(async_session):
    return SqlAlchemyWorkLogRepository(async_session)


@pytest.fixture
async def seeded(repo, make_draft):
    """Three logs: user 1 on the 17th and 18th, user 3 on the 18th."""
    first = await repo.create(
        make_draft(
            day=date(2026, 10, 17),
            tasks=[
                TaskDraft(title="Implement login functionality", time_spent=120, tags=["frontend", "auth"]),
                TaskDraft(title="Fix navigation bug", time_spent=45, tags=["bugfix"]),
            ],
            mood=4,
            blockers="Waiting for design assets",
        )
    )
    second = await repo.create(make_draft(day=date(2026, 10, 18), mood=5))
    third = await repo.create(make_draft(user_id="3", day=date(2026, 10, 18), mood=3))
    return first, second, third


class TestSqlAlchemyWorkLogRepository:
    @pytest.mark.asyncio
    async def test_isinstance_check(self, repo):
        assert isinstance(repo, WorkLogRepository)

    @pytest.mark.asyncio
    async def test_create_and_get_round_trip(self, repo, seeded):
        first = seeded[0]
        stored = await repo.get(first.id)

        assert stored == first
        assert stored.reviewed is False
        assert stored.mood is Mood.GOOD
        assert [t.title for t in stored.tasks] == ["Implement login functionality", "Fix navigation bug"]
        assert stored.tasks[0].tags == ["frontend", "auth"]
        assert stored.total_time == 165

    @pytest.mark.asyncio
    async def test_list_filters(self, repo, seeded):
        first, second, third = seeded
        assert [log.id for log in await repo.list(owner_id="1")] == [first.id, second.id]
        by_day = await repo.list(start_date=date(2026, 10, 18), end_date=date(2026, 10, 18))
        assert {log.id for log in by_day} == {second.id, third.id}
        assert [log.id for log in await repo.list(end_date=date(2026, 10, 17))] == [first.id]

    @pytest.mark.asyncio
    async def test_update_merges_and_replaces_tasks(self, repo, seeded, make_task):
        first = seeded[0]
        updated = await repo.update(
            first.id,
            notes="Done",
            tasks=[make_task("new", "Only task", 15, tags=["solo"])],
        )

        assert updated.notes == "Done"
        assert updated.blockers == "Waiting for design assets"
        stored = await repo.get(first.id)
        assert [t.id for t in stored.tasks] == ["new"]
        assert stored.tasks[0].tags == ["solo"]

    @pytest.mark.asyncio
    async def test_update_removes_orphan_task_rows(self, repo, async_session, seeded, make_task):
        await repo.update(seeded[0].id, tasks=[make_task("only", "Only", 5)])
        count = await async_session.scalar(select(func.count()).select_from(TaskRow))
        # 1 replaced task + 1 task each for the other two logs
        assert count == 3

    @pytest.mark.asyncio
    async def test_update_missing(self, repo):
        with pytest.raises(WorkLogNotFound):
            await repo.update("missing", notes="x")

    @pytest.mark.asyncio
    async def test_update_unknown_field(self, repo, seeded):
        with pytest.raises(ValueError):
            await repo.update(seeded[0].id, id="other")

    @pytest.mark.asyncio
    async def test_delete(self, repo, seeded):
        await repo.delete(seeded[1].id)
        with pytest.raises(WorkLogNotFound):
            await repo.get(seeded[1].id)
        with pytest.raises(WorkLogNotFound):
            await repo.delete(seeded[1].id)
        assert len(await repo.list()) == 2
