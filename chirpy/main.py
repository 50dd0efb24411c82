import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from chirpy.api.router import api_router
from chirpy.api.static import PublicFiles
from chirpy.core.config import Settings
from chirpy.core.context import build_context
from chirpy.core.errors import ChirpyError
from chirpy.core.logging import setup_logging

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    load_dotenv()
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL)
    if not settings.JWT_SECRET:
        logger.warning("JWT_SECRET is empty; access tokens are signed with an empty key")

    api = FastAPI(title="Chirpy", version="1.0.0")
    api.state.ctx = build_context(settings)

    api.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # métricas /metrics (Prometheus)
    Instrumentator().instrument(api).expose(api, include_in_schema=False, should_gzip=True)

    @api.middleware("http")
    async def count_fileserver_hits(request: Request, call_next):
        path = request.url.path
        if path == "/app" or path.startswith("/app/"):
            request.app.state.ctx.hits.incr()
        return await call_next(request)

    api.include_router(api_router)
    store_path = api.state.ctx.store.path
    api.mount(
        "/app",
        PublicFiles(
            directory=settings.FILESERVER_ROOT,
            html=True,
            check_dir=False,
            hidden=[store_path, store_path.with_name(store_path.name + ".tmp")],
        ),
        name="app",
    )

    @api.on_event("startup")
    def startup():
        api.state.ctx.store.ensure()

    @api.exception_handler(ChirpyError)
    def handle_chirpy_error(request: Request, exc: ChirpyError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error(exc.status_code, exc.message)

    @api.exception_handler(StarletteHTTPException)
    def handle_http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @api.exception_handler(RequestValidationError)
    def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
            message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
        else:
            message = "Invalid request"
        return _error(400, message)

    @api.exception_handler(Exception)
    def handle_unexpected(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Something went wrong")

    return api


def run() -> None:
    import uvicorn

    uvicorn.run("chirpy.main:create_app", factory=True, host="0.0.0.0", port=8080)
