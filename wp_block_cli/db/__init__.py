"""Database engine and schema for the WordPress post tables."""

from .engine import create_engine, create_session_factory
from .schema import Base, DbPost, DbPostMeta, create_all

__all__ = ["Base", "DbPost", "DbPostMeta", "create_all", "create_engine", "create_session_factory"]
