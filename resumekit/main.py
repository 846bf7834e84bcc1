"""
ResumeKit - Main FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from resumekit.core.config import settings
from resumekit.core.logging_config import configure_logging
from resumekit.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
    error_payload,
)
from resumekit.core.exceptions import ResumeKitException
from resumekit.resumes.router import router as resumes_router
from resumekit.matching.router import router as matching_router

# Configure logging
configure_logging()
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Resume parsing, validation and layout service",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Add middleware
app.add_middleware(CorrelationIDMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(ExceptionHandlerMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(ResumeKitException)
async def resumekit_exception_handler(request: Request, exc: ResumeKitException):
    """Handle ResumeKit exceptions"""
    logger.warning("request_rejected", path=request.url.path, error=exc.message, status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content=error_payload(exc))


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "extraction_mode": settings.EXTRACTION_MODE,
    }


# Include routers
app.include_router(resumes_router)
app.include_router(matching_router)


@app.on_event("startup")
async def startup_event():
    logger.info("application_starting", version=settings.APP_VERSION, environment=settings.ENVIRONMENT)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("application_shutting_down")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "resumekit.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
