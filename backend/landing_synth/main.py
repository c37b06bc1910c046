"""FastAPI application entry point

Run with: uvicorn landing_synth.main:app --reload
     or: landing-synth-server  (host/port from settings)
"""

import sys
import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from landing_synth.core.config import settings
from landing_synth.api import generate, ui
from landing_synth.models.errors import ApplicationError, ErrorCode

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError):
    """Render ApplicationError as the JSON error body"""
    if exc.http_status >= 500:
        logger.error(f"{exc.code.value} on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code.value} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=exc.model_dump())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request bodies are reported as a missing prompt"""
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    error = ApplicationError(code=ErrorCode.INVALID_PROMPT, message="Prompt is required")
    return JSONResponse(status_code=error.http_status, content=error.model_dump())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Anything unhandled is a defect; report it verbatim as a JSON 500"""
    logger.exception(f"Unhandled error on {request.url.path}: {repr(exc)}")
    error = ApplicationError(
        code=ErrorCode.GENERATION_FAILED,
        message=str(exc) or "Failed to generate landing page",
    )
    return JSONResponse(status_code=error.http_status, content=error.model_dump())


@app.get("/health")
async def health():
    """Health check for monitoring"""
    return {"status": "healthy", "version": settings.api_version}


# Register routes
app.include_router(generate.router, prefix="/api", tags=["generate"])
app.include_router(ui.router, tags=["ui"])


def serve():
    """Run the API with uvicorn on the configured host and port"""
    logger.info(f"Starting server on {settings.backend_host}:{settings.backend_port}")
    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)
