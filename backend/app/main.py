import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import router as api_router
from app.config import CORS_ORIGINS
from app.database.connection import init_db
from app.errors import PersistenceError, InvalidFilterError, field_errors, validation_payload
from app.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Creates the database schema when the application starts."""
    init_db()
    yield


app = FastAPI(
    title="Customer Feedback",
    description="Collects customer feedback with a 1-5 rating and lists the latest entries.",
    version="0.1",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = field_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, sorted(errors))
    return JSONResponse(status_code=422, content=validation_payload(errors))


@app.exception_handler(InvalidFilterError)
async def invalid_filter_handler(request: Request, exc: InvalidFilterError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, sorted(exc.errors))
    return JSONResponse(status_code=400, content=validation_payload(exc.errors))


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": exc.message})


# --- API routes ---
app.include_router(api_router)


@app.get("/")
def read_root():
    """Health check on the root path."""
    return {"message": "Customer feedback backend is running!"}
