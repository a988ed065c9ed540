"""SQLAlchemy-backed repository for ``wp_block`` posts (synced patterns)."""

from __future__ import annotations

import logging
import re
import unicodedata
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from wp_block_cli.db.schema import DbPost, DbPostMeta
from wp_block_cli.models import SyncedPattern, SyncStatus
from wp_block_cli.models.resources import (
    SYNC_STATUS_META_KEY,
    SYNCED_PATTERN_POST_TYPE,
    UNSYNCED_META_VALUE,
)

logger = logging.getLogger(__name__)

POST_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
TRASH_STATUS = "trash"
TRASH_SLUG_SUFFIX = "__trashed"
TRASH_META_STATUS = "_wp_trash_meta_status"
TRASH_META_TIME = "_wp_trash_meta_time"
DESIRED_SLUG_META = "_wp_desired_post_slug"


class RepositoryError(RuntimeError):
    """Base class for repository-level errors."""


class PostNotFoundError(RepositoryError):
    """Raised when a post is missing or belongs to another post type."""


class TrashError(RepositoryError):
    """Raised when a post cannot be moved to the trash."""


def sanitize_title(title: str) -> str:
    """Turn a post title into a URL slug the way WordPress does for post names.

    Accents are stripped, the result is lower-cased and every run of
    characters outside ``[a-z0-9_-]`` collapses into a single dash.
    """
    text = re.sub(r"<[^>]*>", "", title)
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = text.lower().replace(".", "-")
    text = re.sub(r"&.+?;", "", text)
    text = re.sub(r"[^a-z0-9 _-]", "", text)
    text = re.sub(r"\s+", "-", text.strip())
    text = re.sub(r"-+", "-", text)
    return text.strip("-")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _format_post_date(value: datetime | str | None) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime(POST_DATE_FORMAT)
    return str(value)


class SyncedPatternRepository:
    """Reads and writes synced patterns in ``wp_posts`` / ``wp_postmeta``.

    Every public method opens its own short-lived session and commits before
    returning, so a failure part-way through a batch never rolls back earlier
    calls.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._session_factory = session_factory
        self._clock = clock

    def list_patterns(self) -> list[SyncedPattern]:
        """Published patterns ordered by title, ascending."""
        try:
            with self._session_factory() as session:
                rows = session.scalars(
                    select(DbPost)
                    .where(
                        DbPost.post_type == SYNCED_PATTERN_POST_TYPE,
                        DbPost.post_status == "publish",
                    )
                    .order_by(DbPost.post_title.asc(), DbPost.ID.asc())
                ).all()
                statuses = self._sync_meta_values(session, [row.ID for row in rows])
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not query synced patterns: {exc}") from exc

        logger.debug("Loaded %d published synced patterns", len(rows))
        return [self._to_model(row, statuses.get(row.ID)) for row in rows]

    def get_pattern(self, post_id: int) -> SyncedPattern | None:
        """Return the pattern in any status, or ``None`` for a missing or foreign post."""
        try:
            with self._session_factory() as session:
                row = self._get_row(session, post_id)
                if row is None:
                    return None
                statuses = self._sync_meta_values(session, [row.ID])
                return self._to_model(row, statuses.get(row.ID))
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not query post {post_id}: {exc}") from exc

    def insert_pattern(
        self,
        *,
        title: str,
        content: str,
        status: str = "publish",
        slug: str | None = None,
        author: int = 0,
        sync_status: SyncStatus = SyncStatus.SYNCED,
    ) -> int:
        """Insert a new ``wp_block`` post and return its ID."""
        now = self._clock()
        local_now = now.astimezone().replace(tzinfo=None)
        gmt_now = now.astimezone(timezone.utc).replace(tzinfo=None)

        try:
            with self._session_factory() as session:
                row = DbPost(
                    post_type=SYNCED_PATTERN_POST_TYPE,
                    post_title=title,
                    post_content=content,
                    post_status=status,
                    post_author=author,
                    post_date=local_now,
                    post_date_gmt=gmt_now,
                    post_modified=local_now,
                    post_modified_gmt=gmt_now,
                )
                session.add(row)
                session.flush()

                base_slug = sanitize_title(slug or title) or str(row.ID)
                row.post_name = self._unique_slug(session, base_slug, exclude_id=row.ID)

                if sync_status is SyncStatus.UNSYNCED:
                    session.add(
                        DbPostMeta(
                            post_id=row.ID,
                            meta_key=SYNC_STATUS_META_KEY,
                            meta_value=UNSYNCED_META_VALUE,
                        )
                    )
                session.commit()
                post_id = row.ID
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not insert post into the database: {exc}") from exc

        logger.debug("Inserted synced pattern %s (%s)", post_id, sync_status.value)
        return post_id

    def update_pattern(
        self,
        post_id: int,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> None:
        """Update the title and/or content; fields left as ``None`` are untouched."""
        try:
            with self._session_factory() as session:
                row = self._require_row(session, post_id)
                if title is not None:
                    row.post_title = title
                if content is not None:
                    row.post_content = content
                now = self._clock()
                row.post_modified = now.astimezone().replace(tzinfo=None)
                row.post_modified_gmt = now.astimezone(timezone.utc).replace(tzinfo=None)
                session.commit()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not update post {post_id} in the database: {exc}") from exc

        logger.debug("Updated synced pattern %s", post_id)

    def set_sync_status(self, post_id: int, status: SyncStatus) -> None:
        """Write the unsynced marker, or remove every sync-status row for ``synced``."""
        try:
            with self._session_factory() as session:
                self._require_row(session, post_id)
                rows = session.scalars(
                    select(DbPostMeta)
                    .where(DbPostMeta.post_id == post_id, DbPostMeta.meta_key == SYNC_STATUS_META_KEY)
                    .order_by(DbPostMeta.meta_id.asc())
                ).all()

                if status is SyncStatus.UNSYNCED:
                    if rows:
                        for meta in rows:
                            meta.meta_value = UNSYNCED_META_VALUE
                    else:
                        session.add(
                            DbPostMeta(
                                post_id=post_id,
                                meta_key=SYNC_STATUS_META_KEY,
                                meta_value=UNSYNCED_META_VALUE,
                            )
                        )
                else:
                    for meta in rows:
                        session.delete(meta)
                session.commit()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not update sync status of post {post_id}: {exc}") from exc

        logger.debug("Set sync status of %s to %s", post_id, status.value)

    def trash_pattern(self, post_id: int) -> None:
        """Move a pattern to the trash, remembering its status and slug."""
        try:
            with self._session_factory() as session:
                row = self._require_row(session, post_id)
                if row.post_status == TRASH_STATUS:
                    raise TrashError(f"Post {post_id} is already in the trash.")

                trashed_at = self._clock()
                session.add_all(
                    [
                        DbPostMeta(post_id=row.ID, meta_key=TRASH_META_STATUS, meta_value=row.post_status),
                        DbPostMeta(
                            post_id=row.ID,
                            meta_key=TRASH_META_TIME,
                            meta_value=str(int(trashed_at.timestamp())),
                        ),
                    ]
                )
                if row.post_name and not row.post_name.endswith(TRASH_SLUG_SUFFIX):
                    session.add(
                        DbPostMeta(post_id=row.ID, meta_key=DESIRED_SLUG_META, meta_value=row.post_name)
                    )
                    row.post_name = f"{row.post_name}{TRASH_SLUG_SUFFIX}"
                row.post_status = TRASH_STATUS
                session.commit()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not move post {post_id} to the trash: {exc}") from exc

        logger.debug("Trashed synced pattern %s", post_id)

    def delete_pattern(self, post_id: int) -> None:
        """Permanently delete a pattern together with all of its meta rows."""
        try:
            with self._session_factory() as session:
                row = self._require_row(session, post_id)
                for meta in session.scalars(select(DbPostMeta).where(DbPostMeta.post_id == row.ID)):
                    session.delete(meta)
                session.delete(row)
                session.commit()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not delete post {post_id} from the database: {exc}") from exc

        logger.debug("Deleted synced pattern %s", post_id)

    def _get_row(self, session: Session, post_id: int) -> DbPost | None:
        row = session.get(DbPost, post_id)
        if row is None or row.post_type != SYNCED_PATTERN_POST_TYPE:
            return None
        return row

    def _require_row(self, session: Session, post_id: int) -> DbPost:
        row = self._get_row(session, post_id)
        if row is None:
            raise PostNotFoundError(f"Synced pattern {post_id} does not exist.")
        return row

    @staticmethod
    def _sync_meta_values(session: Session, post_ids: list[int]) -> dict[int, str | None]:
        """First sync-status meta value per post, by ascending ``meta_id``."""
        if not post_ids:
            return {}
        rows = session.execute(
            select(DbPostMeta.post_id, DbPostMeta.meta_value)
            .where(DbPostMeta.post_id.in_(post_ids), DbPostMeta.meta_key == SYNC_STATUS_META_KEY)
            .order_by(DbPostMeta.meta_id.asc())
        ).all()
        values: dict[int, str | None] = {}
        for post_id, meta_value in rows:
            values.setdefault(post_id, meta_value)
        return values

    @staticmethod
    def _unique_slug(session: Session, slug: str, *, exclude_id: int) -> str:
        taken = set(
            session.scalars(
                select(DbPost.post_name).where(
                    DbPost.post_type == SYNCED_PATTERN_POST_TYPE,
                    DbPost.ID != exclude_id,
                    DbPost.post_name.like(f"{slug}%"),
                )
            )
        )
        if slug not in taken:
            return slug
        suffix = 2
        while f"{slug}-{suffix}" in taken:
            suffix += 1
        return f"{slug}-{suffix}"

    @staticmethod
    def _to_model(row: DbPost, sync_meta: str | None) -> SyncedPattern:
        return SyncedPattern(
            ID=row.ID,
            post_title=row.post_title or "",
            post_name=row.post_name or "",
            post_content=row.post_content or "",
            post_excerpt=row.post_excerpt or "",
            post_status=row.post_status,
            post_author=row.post_author or 0,
            post_date=_format_post_date(row.post_date),
            sync_status=SyncStatus.from_meta(sync_meta),
        )


__all__ = [
    "PostNotFoundError",
    "RepositoryError",
    "SyncedPatternRepository",
    "TrashError",
    "sanitize_title",
]
