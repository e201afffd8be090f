"""
Author CRUD helpers.

`get_author_list` turns the author table into display lines such as
``"Austen, Jane : 1775 - 1817"`` and `show_all_authors` sends those lines
(or a fallback message) to a response sink. Both depend only on the
`AuthorStore` protocol; `SqlAuthorStore` is the SQLAlchemy implementation.
"""
import logging
from datetime import date
from typing import Any, Iterable, Protocol, Sequence

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .errors import AuthorStoreError, InvalidSortError
from .schemas.author import AuthorCreate, AuthorRecord

logger = logging.getLogger(__name__)

NO_AUTHORS_MESSAGE = "No authors found"
FAMILY_NAME_ASCENDING = [("family_name", "ascending")]

AUTHOR_COLUMNS = ("first_name", "family_name", "date_of_birth", "date_of_death")
SORT_DIRECTIONS = {
    "ascending": "ASC",
    "asc": "ASC",
    1: "ASC",
    "descending": "DESC",
    "desc": "DESC",
    -1: "DESC",
}


class AuthorStore(Protocol):
    def query_all(self, sort: Sequence[tuple[str, Any]] | None = None) -> Iterable[Any]:
        ...


class ResponseSink(Protocol):
    def send(self, payload: list[str] | str) -> None:
        ...


def _order_by_clause(sort):
    if not sort:
        return ""
    parts = []
    for field, direction in sort:
        if field not in AUTHOR_COLUMNS:
            raise InvalidSortError(field, direction)
        key = direction.lower() if isinstance(direction, str) else direction
        if key not in SORT_DIRECTIONS:
            raise InvalidSortError(field, direction)
        parts.append(f"{field} {SORT_DIRECTIONS[key]}")
    return " ORDER BY " + ", ".join(parts)


class SqlAuthorStore:
    """AuthorStore over the `authors` table of a SQLAlchemy engine.

    Takes a ready `engine` or an `engine_factory`. The factory runs on first
    use, inside `query_all`/`add`, and its database errors become
    AuthorStoreError like any other query failure.
    """

    def __init__(self, engine=None, engine_factory=None):
        if engine is None and engine_factory is None:
            raise ValueError("SqlAuthorStore needs an engine or an engine_factory")
        self._engine = engine
        self._engine_factory = engine_factory

    @property
    def engine(self):
        if self._engine is None:
            self._engine = self._engine_factory()
        return self._engine

    def query_all(self, sort=None) -> list[AuthorRecord]:
        query = "SELECT first_name, family_name, date_of_birth, date_of_death FROM authors"
        query += _order_by_clause(sort)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(text(query)).mappings().all()
        except SQLAlchemyError as exc:
            raise AuthorStoreError(f"Could not query authors: {exc}") from exc
        return [AuthorRecord.model_validate(dict(row)) for row in rows]

    def add(self, author: AuthorCreate) -> int:
        query = text(
            """
            INSERT INTO authors (first_name, family_name, date_of_birth, date_of_death)
            VALUES (:first_name, :family_name, :date_of_birth, :date_of_death)
            """
        )
        params = {
            "first_name": author.first_name or "",
            "family_name": author.family_name,
            "date_of_birth": author.date_of_birth.isoformat() if author.date_of_birth else None,
            "date_of_death": author.date_of_death.isoformat() if author.date_of_death else None,
        }
        try:
            with self.engine.connect() as conn:
                transaction = conn.begin()
                try:
                    author_id = conn.execute(query, params).lastrowid
                    transaction.commit()
                except Exception:
                    transaction.rollback()
                    raise
        except SQLAlchemyError as exc:
            raise AuthorStoreError(f"Could not add author {author.family_name!r}: {exc}") from exc
        logger.info("Added author %s, %s (id=%s)", author.family_name, author.first_name, author_id)
        return author_id


def _year(value) -> str:
    """Calendar year of a date-like value, or "" when unknown."""
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return f"{value.year:04d}"


def format_author_line(author) -> str:
    first_name = getattr(author, "first_name", None)
    family_name = author.family_name
    # a missing name on either side drops the whole name segment
    name = f"{family_name}, {first_name}" if first_name and family_name else ""
    birth = _year(getattr(author, "date_of_birth", None))
    death = _year(getattr(author, "date_of_death", None))
    return f"{name} : {birth} - {death}"


def get_author_list(store: AuthorStore) -> list[str]:
    """Return every author as a display line, sorted by family name.

    Lines keep the order the store returns. Any failure while querying or
    formatting is logged and yields an empty list.
    """
    try:
        authors = store.query_all(sort=FAMILY_NAME_ASCENDING)
        return [format_author_line(author) for author in authors]
    except Exception as exc:
        logger.error("Error fetching authors: %s: %s", type(exc).__name__, exc)
        return []


def show_all_authors(sink: ResponseSink, store: AuthorStore) -> None:
    """Send the author list to `sink`, or NO_AUTHORS_MESSAGE when there is none."""
    try:
        authors = get_author_list(store)
    except Exception as exc:
        logger.error("Error building author list: %s: %s", type(exc).__name__, exc)
        authors = []

    if authors:
        sink.send(authors)
    else:
        sink.send(NO_AUTHORS_MESSAGE)
