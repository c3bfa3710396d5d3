import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import CORS_ORIGIN_REGEX, DB_PATH, LOG_LEVEL
from .database import open_database
from .logging_setup import setup_logging
from .routers import tasks

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Task Service API",
    description="Task list API persisted to a single JSON file",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
    max_age=3600,
)

# Include routers
app.include_router(tasks.router, tags=["tasks"])


# Load the task database on startup
@app.on_event("startup")
def on_startup():
    setup_logging(LOG_LEVEL)
    app.state.db = open_database(DB_PATH)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Bad ids in the path are unknown routes; bad bodies are bad requests."""
    errors = exc.errors()
    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ())[1:]) or 'body'}: {err.get('msg', '')}"
        for err in errors
    )
    return PlainTextResponse(f"Invalid task payload: {detail}", status_code=status.HTTP_400_BAD_REQUEST)


@app.get("/health")
def health_check():
    db = getattr(app.state, "db", None)
    return {"status": "healthy", "last_save_ok": db.last_save_ok if db is not None else True}
