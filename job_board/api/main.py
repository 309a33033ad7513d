"""
Main FastAPI application for the internal job board.

This module sets up the FastAPI app with CORS and route registration.
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from job_board.config import Settings
from job_board.errors import FetchError, JobNotFoundError
from job_board.api.routes import explorer, jobs, session

API_VERSION = "1.0.0"

settings = Settings.from_env()

app = FastAPI(
    title="Internal Job Board API",
    description="View, filter and manage internal job postings",
    version=API_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

# In development we allow common local origins; in production the list
# comes from JOBBOARD_ALLOWED_ORIGINS.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# A failed resync after a mutation still reports 503; the write itself
# is already committed.
@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)}
    )


@app.exception_handler(JobNotFoundError)
async def job_not_found_handler(request: Request, exc: JobNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)}
    )


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": API_VERSION
    }


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "name": "Internal Job Board API",
        "version": API_VERSION,
        "docs": "/api/docs",
        "health": "/api/health"
    }


app.include_router(session.router)
app.include_router(jobs.router)
app.include_router(explorer.router)
