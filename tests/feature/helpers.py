"""Out-of-band database reads for feature tests.

The app under test runs on the TestClient's event loop; these helpers open a
separate engine on the same SQLite file to check what was persisted.
"""

import asyncio

from inkpost.domain.entities.user import User
from inkpost.infrastructure.database.async_db import Database
from inkpost.infrastructure.repositories.blog_repository import BlogRepository
from inkpost.infrastructure.repositories.user_repository import UserRepository


def _run(db_url, work):
    async def _main():
        db = Database(db_url)
        try:
            async with db.session() as session:
                return await work(session)
        finally:
            await db.dispose()

    return asyncio.run(_main())


def fetch_user(db_url, email) -> User:
    return _run(db_url, lambda session: UserRepository(session).get_by_email(email))


def count_blogs(db_url, author_id, include_drafts=True) -> int:
    return _run(db_url, lambda session: BlogRepository(session).count_by_author(author_id, include_drafts))
