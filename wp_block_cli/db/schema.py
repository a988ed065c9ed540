"""SQLAlchemy declarative mapping of the WordPress post tables."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Index, Integer, String, Text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# WordPress uses BIGINT UNSIGNED ids; SQLite only autoincrements INTEGER keys.
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")

# Stand-in for an unset date; MySQL's zero date has no datetime equivalent.
ZERO_DATETIME = datetime(1970, 1, 1)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy declarative mappings."""


class DbPost(Base):
    """ORM mapping for ``wp_posts``; only the columns WordPress requires are populated."""

    __tablename__ = "wp_posts"
    __table_args__ = (
        Index("ix_wp_posts_post_name", "post_name"),
        Index("ix_wp_posts_type_status_date", "post_type", "post_status", "post_date", "ID"),
        Index("ix_wp_posts_post_author", "post_author"),
    )

    ID: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    post_author: Mapped[int] = mapped_column(ID_TYPE, default=0, nullable=False)
    post_date: Mapped[datetime] = mapped_column(DateTime, default=ZERO_DATETIME, nullable=False)
    post_date_gmt: Mapped[datetime] = mapped_column(DateTime, default=ZERO_DATETIME, nullable=False)
    post_content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_title: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_excerpt: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_status: Mapped[str] = mapped_column(String(20), default="publish", nullable=False)
    comment_status: Mapped[str] = mapped_column(String(20), default="closed", nullable=False)
    ping_status: Mapped[str] = mapped_column(String(20), default="closed", nullable=False)
    post_password: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    post_name: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    to_ping: Mapped[str] = mapped_column(Text, default="", nullable=False)
    pinged: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_modified: Mapped[datetime] = mapped_column(DateTime, default=ZERO_DATETIME, nullable=False)
    post_modified_gmt: Mapped[datetime] = mapped_column(DateTime, default=ZERO_DATETIME, nullable=False)
    post_content_filtered: Mapped[str] = mapped_column(Text, default="", nullable=False)
    post_parent: Mapped[int] = mapped_column(ID_TYPE, default=0, nullable=False)
    guid: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    menu_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    post_type: Mapped[str] = mapped_column(String(20), default="post", nullable=False)
    post_mime_type: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    comment_count: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)


class DbPostMeta(Base):
    """ORM mapping for ``wp_postmeta``. WordPress keeps no foreign key to the post."""

    __tablename__ = "wp_postmeta"
    __table_args__ = (
        Index("ix_wp_postmeta_post_id", "post_id"),
        Index("ix_wp_postmeta_meta_key", "meta_key"),
    )

    meta_id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(ID_TYPE, default=0, nullable=False)
    meta_key: Mapped[str | None] = mapped_column(String(255), nullable=True)
    meta_value: Mapped[str | None] = mapped_column(Text, nullable=True)


def create_all(engine: Engine) -> None:
    """Create the post tables when they are missing; existing tables are left untouched."""
    Base.metadata.create_all(engine, checkfirst=True)


__all__ = ["Base", "DbPost", "DbPostMeta", "ID_TYPE", "ZERO_DATETIME", "create_all"]
