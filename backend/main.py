from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
from logging.handlers import RotatingFileHandler
import sys
import uuid

from sqlalchemy.orm import Session as DBSession

from api import users, books
from config.app_config import settings
from constants import HTTPStatus, ServerConfig
from database import engine, get_db
from init_db import init_database
from services.schema_validator import SchemaValidator
from utils.logging_utils import RequestContextFilter, set_logging_context, clear_logging_context

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'

_logging_configured = False


def configure_logging():
    """Attach the rotating file and console handlers to the root logger once."""
    global _logging_configured
    if _logging_configured:
        return

    settings.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = settings.log_dir / "backend.log"
    log_formatter = logging.Formatter(LOG_FORMAT)
    context_filter = RequestContextFilter()

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)
    file_handler.addFilter(context_filter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.addFilter(context_filter)

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    _logging_configured = True
    logging.getLogger(__name__).info(f"Logging initialized: {log_file}")


configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {ServerConfig.SERVICE_NAME} with {settings!r}")
    init_database()

    schema = SchemaValidator.check(engine)
    if schema["valid"]:
        logger.info("✅ Database schema valid")
    else:
        logger.warning(f"⚠️  Database schema issues: {schema['issues']}")

    yield

    engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=ServerConfig.SERVICE_NAME,
    description="API to manage users and their book collections",
    version=ServerConfig.VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Tag every log line emitted while serving a request with its id"""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
    set_logging_context(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_exception(request: Request, exc: StarletteHTTPException):
    """Error bodies are plain descriptive strings, not JSON envelopes"""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def plain_text_validation_error(request: Request, exc: RequestValidationError):
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "; ".join(parts) or "Invalid request"
    logger.warning(f"Request validation failed on {request.url.path}: {message}")
    return PlainTextResponse(message, status_code=HTTPStatus.UNPROCESSABLE_ENTITY)


# Include API routers
app.include_router(users.router, prefix="/api/user", tags=["users"])
app.include_router(books.router, prefix="/api/book", tags=["books"])


@app.get("/api/health")
def health_check(db: DBSession = Depends(get_db)):
    """Health check endpoint"""
    schema = SchemaValidator.check(db.get_bind())
    return {
        "status": "ok" if schema["valid"] else "degraded",
        "service": ServerConfig.SERVICE_NAME,
        "version": ServerConfig.VERSION,
        "database": {"valid": schema["valid"], "issues": schema["issues"]},
    }


@app.get("/")
def root():
    """Root endpoint - API only mode"""
    return {
        "message": ServerConfig.SERVICE_NAME,
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Starting {ServerConfig.SERVICE_NAME} on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port)
