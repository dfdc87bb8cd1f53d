from __future__ import annotations

import logging
import sys
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from starlette.middleware.base import RequestResponseEndpoint

from . import config as cfg
from .client import ParlamentClient
from .errors import RefreshError
from .index import IndexStore
from .search import search

# ── Configure logging ────────────────────────────────────────────────────────
logging.basicConfig(
    level=cfg.LOG_LEVEL,
    format="%(levelname)s:     %(message)s",
    stream=sys.stderr,
    force=True,
)
LOGGER = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

STATS_PAGE = (
    "<html><body><h1>Statistics</h1>"
    "<p>Number of committees: {count}</p>"
    "</body></html>"
)

# ── App state ────────────────────────────────────────────────────────────────

store = IndexStore()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    if cfg.SKIP_REFRESH:
        LOGGER.warning("Skipping committee refresh; serving an empty index.")
        yield
        return

    t0 = time.perf_counter()
    client = ParlamentClient(base_url=cfg.BASE_URL, timeout_seconds=cfg.TIMEOUT_SECONDS)
    try:
        index = store.refresh(client)
    except RefreshError as exc:
        LOGGER.critical("Committee refresh failed, refusing to start: %s", exc)
        raise
    finally:
        client.close()

    LOGGER.info(
        "started: %d active committees loaded from %s in %.2fs",
        len(index),
        cfg.BASE_URL,
        time.perf_counter() - t0,
    )
    yield


app = FastAPI(title="Committee Search", lifespan=lifespan)


# ── Access log ───────────────────────────────────────────────────────────────
@app.middleware("http")
async def _access_log(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """One INFO line per request, with the size of the index it was served from."""
    t0 = time.perf_counter()
    response = await call_next(request)
    LOGGER.info(
        "%s %s -> %d in %.1fms [%d committees]",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - t0) * 1000,
        len(store.current),
    )
    return response


# ── Search page ──────────────────────────────────────────────────────────────


def _render(request: Request, query: str) -> Response:
    results = search(store.current, query, base_url=cfg.BASE_URL)
    try:
        return templates.TemplateResponse(
            request,
            "index.html",
            {"query": query, "results": results},
        )
    except TemplateError:
        LOGGER.exception("Failed to render search page")
        return PlainTextResponse("failed to execute template", status_code=500)


@app.get("/", response_class=HTMLResponse)
async def index_page(request: Request) -> Response:
    return _render(request, "")


@app.post("/", response_class=HTMLResponse)
async def search_page(request: Request) -> Response:
    form = await request.form()
    values = form.getlist("query")
    if not values:
        return PlainTextResponse("no query value", status_code=400)
    query = str(values[0])
    LOGGER.info("search for %s", query)
    return _render(request, query)


# ── Statistics / health ──────────────────────────────────────────────────────


@app.get("/data/", response_class=HTMLResponse)
async def data() -> HTMLResponse:
    return HTMLResponse(STATS_PAGE.format(count=len(store.current)))


@app.get("/health")
async def health() -> dict:
    """Service health check with data counts."""
    return {
        "status": "ok",
        "ready": store.populated,
        "committees": len(store.current),
    }
