from datetime import date

import pytest
from sqlalchemy import create_engine

from library_catalog.db_connection import ensure_schema
from library_catalog.schemas.author import AuthorRecord


class FakeAuthorStore:
    """In-memory AuthorStore that records the sort it was asked for."""

    def __init__(self, authors=None, error=None):
        self.authors = list(authors or [])
        self.error = error
        self.sort_calls = []

    def query_all(self, sort=None):
        self.sort_calls.append(sort)
        if self.error is not None:
            raise self.error
        return list(self.authors)


class RecordingSink:
    def __init__(self):
        self.payloads = []

    def send(self, payload):
        self.payloads.append(payload)


@pytest.fixture
def sorted_authors():
    return [
        AuthorRecord(first_name="Jane", family_name="Austen",
                     date_of_birth=date(1775, 12, 16), date_of_death=date(1817, 7, 18)),
        AuthorRecord(first_name="Amitav", family_name="Ghosh",
                     date_of_birth=date(1835, 11, 30), date_of_death=date(1910, 4, 21)),
        AuthorRecord(first_name="Rabindranath", family_name="Tagore",
                     date_of_birth=date(1812, 2, 7), date_of_death=date(1870, 6, 9)),
    ]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def sqlite_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    ensure_schema(engine)
    yield engine
    engine.dispose()
