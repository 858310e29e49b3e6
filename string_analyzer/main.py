from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime, timezone
import logging

from string_analyzer import __version__, config
from string_analyzer.api.profile import router as profile_router
from string_analyzer.api.routes import router as strings_router
from string_analyzer.store import StringStore

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def log_config_source():
    if config.ENV_FILE_LOADED:
        logger.info("Loading from .env file (local development)")
    else:
        logger.info("Loading from environment (production)")


log_config_source()

# Create FastAPI app
app = FastAPI(
    title="String Analyzer Service",
    description="Analyze, store and query string properties",
    version=__version__
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Process-lifetime store, replaced per test through dependency overrides
app.state.store = StringStore()

# Include routers
app.include_router(strings_router, tags=["strings"])
app.include_router(profile_router, tags=["profile"])


@app.get("/")
def root():
    """Root endpoint with API information"""
    return {
        "message": "String Analyzer Service",
        "version": __version__,
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings/{string_value}": "Get specific string analysis",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{string_value}": "Delete a string",
            "GET /me": "Profile information with a random cat fact",
            "GET /health": "Health check"
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        field = error['loc'][-1]
        errors[field] = error['msg']

    # A well-formed body whose value has the wrong type is unprocessable,
    # anything else (missing fields, bad JSON, bad query params) is a bad request
    type_errors_only = all(
        error['loc'][0] == "body" and error['type'].endswith("_type") and len(error['loc']) > 1
        for error in exc.errors()
    )
    status_code = (
        status.HTTP_422_UNPROCESSABLE_ENTITY if type_errors_only
        else status.HTTP_400_BAD_REQUEST
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": "Validation failed",
            "details": errors
        }
    )


# HTTPException handler
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # If detail is already a dict with 'error' key, return as is
    if isinstance(exc.detail, dict) and 'error' in exc.detail:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail
        )
    # Otherwise wrap it
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)}
    )


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error"
        }
    )


def run():
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
