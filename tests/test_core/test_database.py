"""Tests for database initialization and sessions."""

import pytest

from teamlog.core import database
from teamlog.infrastructure.repositories import SqlAlchemyWorkLogRepository


@pytest.fixture
async def db(tmp_path):
    await database.init_database(f"sqlite+aiosqlite:///{tmp_path}/data/teamlog.db")
    yield
    await database.close_database()


class TestDatabase:
    @pytest.mark.asyncio
    async def test_creates_sqlite_directory(self, tmp_path, db):
        assert (tmp_path / "data").is_dir()

    @pytest.mark.asyncio
    async def test_health_check(self, db):
        assert await database.health_check() is True

    @pytest.mark.asyncio
    async def test_session_commits_on_success(self, db, make_draft):
        async with database.get_db_session() as session:
            created = await SqlAlchemyWorkLogRepository(session).create(make_draft())

        async with database.get_db_session() as session:
            stored = await SqlAlchemyWorkLogRepository(session).get(created.id)
        assert stored.tasks[0].title == "Write tests"

    @pytest.mark.asyncio
    async def test_session_rolls_back_on_error(self, db, make_draft):
        with pytest.raises(RuntimeError):
            async with database.get_db_session() as session:
                await SqlAlchemyWorkLogRepository(session).create(make_draft())
                raise RuntimeError("boom")

        async with database.get_db_session() as session:
            assert await SqlAlchemyWorkLogRepository(session).list() == []
