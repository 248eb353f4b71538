# bookstore/main.py
import logging
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import catalog_router
from .config import settings
from .models import StatusMessage
from .storage import BookStore


logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger("bookstore")


def _client_address(request: Request) -> str:
    if request.client is None:
        return "-"
    return f"{request.client.host}:{request.client.port}"


def create_app(store: Optional[BookStore] = None) -> FastAPI:
    """Build the application around ``store`` (a fresh empty one by default)."""
    app = FastAPI(
        title=settings.app_name,
        description="CRUD over an in-memory collection of books.",
        version=settings.app_version,
        # the HTML docs pages cannot be served as application/json
        docs_url=None,
        redoc_url=None,
    )
    app.state.book_store = store if store is not None else BookStore()

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        started = time.perf_counter()
        logger.info(
            "request.started method=%s client=%s path=%s",
            request.method,
            _client_address(request),
            request.url.path,
        )
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception("request.failed method=%s path=%s elapsed_ms=%.2f", request.method, request.url.path, elapsed_ms)
            raise
        response.headers["content-type"] = "application/json"
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "request.completed method=%s path=%s status=%s elapsed_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    # Errors go out as a bare JSON string, not {"detail": ...}.
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = exc.detail
        if exc.status_code == 405:
            detail = f"Method {request.method} not allowed"
        return JSONResponse(status_code=exc.status_code, content=detail, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        reasons = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        )
        logger.info("request.rejected method=%s path=%s reason=%s", request.method, request.url.path, reasons)
        return JSONResponse(status_code=400, content=f"Bad request. {reasons}")

    @app.get("/hello", response_model=StatusMessage)
    def hello() -> StatusMessage:
        return StatusMessage(Message="hello")

    app.include_router(catalog_router)
    return app


app = create_app()


def run() -> None:
    logger.info("bookstore.startup host=%s port=%s", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout,
        h11_max_incomplete_event_size=settings.max_header_bytes,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
