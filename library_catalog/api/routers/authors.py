from functools import lru_cache

from fastapi import APIRouter, Depends, Response

from ...crud_authors import SqlAuthorStore, show_all_authors
from ...db_connection import ensure_schema, get_engine
from ...schemas.author import AuthorCreate, AuthorOut
from ..responses import ResponseSink

router = APIRouter()


@lru_cache(maxsize=1)
def _default_engine():
    engine = get_engine()
    ensure_schema(engine)
    return engine


def get_author_store() -> SqlAuthorStore:
    return SqlAuthorStore(engine_factory=_default_engine)


@router.get("/", response_model=None)
def list_authors(store: SqlAuthorStore = Depends(get_author_store)) -> Response:
    sink = ResponseSink()
    show_all_authors(sink, store)
    return sink.response


@router.post("/", response_model=AuthorOut, status_code=201)
def create_author(payload: AuthorCreate, store: SqlAuthorStore = Depends(get_author_store)):
    author_id = store.add(payload)
    return AuthorOut(id=author_id, **payload.model_dump())
