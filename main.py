import logging
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.database import close_db, init_db
from app.core.deps import require_admin
from app.core.exceptions import PortalError
from app.core.logging_config import setup_logging
from app.api.endpoints import audience, auth, content, core, jobs, marketing, preparation, system

setup_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up Jobtica Portal API...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down Jobtica Portal API...")
    close_db()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Job listings, exam notices and preparation resources",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _invalid_field_message(errors) -> str:
    """`Validation Error: Invalid field: <name>` for the first failing field."""
    if not errors:
        return "Validation Error: Invalid request body."
    location = [str(part) for part in errors[0].get("loc", ()) if part != "body"]
    name = ".".join(location) or "body"
    return f"Validation Error: Invalid field: {name}"


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"message": "Internal Server Error"})
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": _invalid_field_message(exc.errors())})


@app.exception_handler(PydanticValidationError)
async def pydantic_validation_handler(request: Request, exc: PydanticValidationError):
    return JSONResponse(status_code=400, content={"message": _invalid_field_message(exc.errors())})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


# Include routers
admin_only = [Depends(require_admin)]

app.include_router(core.router, prefix=settings.API_PREFIX)
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(jobs.router, prefix=f"{settings.API_PREFIX}/content", dependencies=admin_only)
app.include_router(content.router, prefix=f"{settings.API_PREFIX}/content", dependencies=admin_only)
app.include_router(preparation.router, prefix=settings.API_PREFIX)
app.include_router(audience.router, prefix=settings.API_PREFIX)
app.include_router(marketing.router, prefix=settings.API_PREFIX)
app.include_router(system.router, prefix=settings.API_PREFIX)

# Crawlers expect these at the site root
app.add_api_route("/robots.txt", core.robots, methods=["GET"], include_in_schema=False)
app.add_api_route("/sitemap.xml", core.sitemap, methods=["GET"], include_in_schema=False)


if __name__ == "__main__":
    import uvicorn
    if settings.should_listen:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.PORT,
            reload=not settings.is_production,
            log_level=settings.LOG_LEVEL.lower()
        )
    else:
        logger.info("Serverless environment detected, not starting a listener")
