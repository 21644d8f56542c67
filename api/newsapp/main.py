import argparse
import pathlib
import sys
from datetime import datetime, timezone

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from .errors import SearchError
from .ingest.newsapi import ArticleFetcher
from .logging import configure_logging
from .schemas import SearchResult
from .search import parse_search_params
from .settings import Settings
from .templates import load_templates, render

STATIC_DIR = pathlib.Path(__file__).parent / "static"

log = structlog.get_logger(__name__)

def create_app(settings: Settings, fetcher: ArticleFetcher | None = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="News Search")
    app.state.settings = settings
    app.state.templates = load_templates()
    app.state.fetcher = fetcher or ArticleFetcher(
        base_url=settings.NEWSAPI_BASE_URL,
        language=settings.NEWSAPI_LANGUAGE,
        timeout=settings.NEWSAPI_TIMEOUT_SECONDS,
    )
    app.mount("/assets", StaticFiles(directory=str(STATIC_DIR)), name="assets")

    @app.exception_handler(SearchError)
    def search_error_handler(request: Request, exc: SearchError):
        log.warning("search.failed", path=request.url.path, error=type(exc).__name__,
                    status_code=exc.status_code, detail=exc.detail)
        return PlainTextResponse(exc.detail, status_code=exc.status_code)

    _register_routes(app)
    return app

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_fetcher(request: Request) -> ArticleFetcher:
    return request.app.state.fetcher

def _register_routes(app: FastAPI) -> None:

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request):
        return render(request.app.state.templates, "index.html", {"result": None})

    @app.get("/search", response_class=HTMLResponse)
    def search(request: Request,
               settings: Settings = Depends(get_settings),
               fetcher: ArticleFetcher = Depends(get_fetcher)):
        cursor = parse_search_params(request.query_params)
        result: SearchResult = fetcher.fetch(
            cursor,
            api_key=settings.NEWSAPI_KEY.get_secret_value(),
            page_size=settings.NEWSAPI_PAGE_SIZE,
        )
        return render(request.app.state.templates, "index.html", {"result": result})

    @app.get("/healthz")
    def healthz():
        return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}

def run(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="News search front end")
    parser.add_argument("--apikey", help="Newsapi.org access key")
    parser.add_argument("--host", help="Bind address")
    parser.add_argument("--port", type=int, help="Bind port")
    args = parser.parse_args(argv)

    overrides = {}
    if args.apikey:
        overrides["NEWSAPI_KEY"] = args.apikey
    if args.host:
        overrides["API_HOST"] = args.host
    if args.port:
        overrides["API_PORT"] = args.port
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        if any(err["loc"] and err["loc"][0] == "NEWSAPI_KEY" for err in exc.errors()):
            sys.exit("apiKey must be set")
        sys.exit(f"invalid configuration: {exc}")

    app = create_app(settings)
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)

if __name__ == "__main__":
    run()
