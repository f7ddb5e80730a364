from inkpost.infrastructure.database.async_db import Database

__all__ = ["Database"]
