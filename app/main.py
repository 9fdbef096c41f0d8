from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

import logging  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from sqlalchemy.engine import make_url  # noqa: E402
from starlette.exceptions import HTTPException as StarletteHTTPException  # noqa: E402

from app.api.routes_extract import router as extract_router  # noqa: E402
from app.api.routes_extracted_data import router as extracted_data_router  # noqa: E402
from app.api.routes_health import router as health_router  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.core.errors import ClientInputError, DependencyError, MissingImageError  # noqa: E402
from app.core.middleware import (  # noqa: E402
    AccessLogMiddleware,
    OriginAllowlistMiddleware,
    SecurityHeadersMiddleware,
)
from app.db.session import init_models  # noqa: E402

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    url = make_url(settings.database_url)
    await init_models()
    logger.info("Database ready: %s (%s)", url.get_backend_name(), url.host or url.database)
    logger.info("Server is running on port %s", settings.port)
    logger.info("Environment: %s", settings.app_env)
    yield


async def client_error_handler(request: Request, exc: ClientInputError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def dependency_error_handler(request: Request, exc: DependencyError) -> JSONResponse:
    content = {"error": exc.error}
    if not settings.is_production:
        content["details"] = exc.detail
    return JSONResponse(status_code=500, content=content)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 405 is a known path with no route for the method; no endpoint means nothing matched
    if exc.status_code == 405 or (exc.status_code == 404 and request.scope.get("endpoint") is None):
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        return JSONResponse(
            status_code=404,
            content={"error": "Route not found", "message": f"Cannot {request.method} {target}"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # a non-file "image" part counts as no image at all
    if any(tuple(err.get("loc", ()))[-1:] == ("image",) for err in errors):
        return await client_error_handler(request, MissingImageError())
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}" for err in errors
    )
    logger.warning("%s %s -> 422: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=422, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": str(exc) if settings.is_development else "Something went wrong!",
        },
    )


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Document Extraction Service", version=settings.app_version, lifespan=lifespan)

    # last added runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginAllowlistMiddleware, allowed_origins=settings.cors_allowed_origins)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    app.add_exception_handler(ClientInputError, client_error_handler)
    app.add_exception_handler(DependencyError, dependency_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router)
    app.include_router(extract_router)
    app.include_router(extracted_data_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port)
