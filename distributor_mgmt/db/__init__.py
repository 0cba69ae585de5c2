"""Database package — async SQLAlchemy engine, session factory, Base."""
from distributor_mgmt.db.base import Base, async_session_factory, engine, get_db, get_session

__all__ = ["Base", "async_session_factory", "engine", "get_db", "get_session"]
