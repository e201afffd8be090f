from fastapi import FastAPI

from .api.routers import authors
from .core.config import get_settings
from .core.errors import register_error_handlers
from .core.logging import configure_logging

settings = get_settings()
configure_logging(settings["log_level"])

app = FastAPI(
    title="Library Catalog API",
    version="0.1.0",
)
register_error_handlers(app)


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


app.include_router(authors.router, prefix="/authors", tags=["authors"])
