import pytest
from sqlalchemy import inspect, text

from inkpost.core.exceptions import ValidationError
from inkpost.infrastructure.database.async_db import Database

INSERT_USER = text(
    "INSERT INTO users (fullname, email, username, profile_img, google_auth, "
    "total_posts, total_reads, joined_at) "
    "VALUES ('Ann Bee', 'a@b.co', 'a', 'https://img', 0, 0, 0, '2024-01-01 00:00:00')"
)


@pytest.mark.asyncio
async def test_create_tables(database):
    async with database.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    assert {"users", "blogs"} <= set(tables)


@pytest.mark.asyncio
async def test_create_tables_is_idempotent(database):
    await database.create_tables()


@pytest.mark.asyncio
async def test_health_check_on_reachable_database(database):
    assert await database.check_health() is True


@pytest.mark.asyncio
async def test_health_check_on_unreachable_database(tmp_path):
    # the parent directory does not exist, so SQLite cannot open the file
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'inkpost.db'}")
    try:
        assert await db.check_health() is False
    finally:
        await db.dispose()


@pytest.mark.asyncio
async def test_session_rolls_back_on_error(database):
    with pytest.raises(RuntimeError):
        async with database.session() as session:
            await session.execute(INSERT_USER)
            raise RuntimeError("boom")

    async with database.session() as session:
        result = await session.execute(text("SELECT COUNT(*) FROM users"))
        assert result.scalar_one() == 0


@pytest.mark.asyncio
async def test_client_error_rollback_is_not_logged_as_error(database, mocker):
    session_logger = mocker.patch("inkpost.infrastructure.database.async_db.logger")

    with pytest.raises(ValidationError):
        async with database.session() as session:
            await session.execute(INSERT_USER)
            raise ValidationError("Email is invalid")

    session_logger.error.assert_not_called()
    session_logger.debug.assert_any_call("Async database session rollback", error_code="validation_error")
    async with database.session() as session:
        result = await session.execute(text("SELECT COUNT(*) FROM users"))
        assert result.scalar_one() == 0


@pytest.mark.asyncio
async def test_unexpected_error_rollback_is_logged_as_error(database, mocker):
    session_logger = mocker.patch("inkpost.infrastructure.database.async_db.logger")

    with pytest.raises(RuntimeError):
        async with database.session():
            raise RuntimeError("boom")

    session_logger.error.assert_called_once_with("Async database session rollback due to error")
