"""FastAPI application entry point for Levelboard."""
import logging
import os
import time
import uvicorn
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.openapi.utils import get_openapi

from levelboard.constants import API_VERSION, SERVICE_NAME
from config import settings
from levelboard.routes import auth, hall_of_fame, levels, system

# Configure logging FIRST (before creating FastAPI app)
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.StreamHandler(),
    ]
)

# Set uvicorn logging level too
uvicorn_logger = logging.getLogger("uvicorn")
uvicorn_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

app = FastAPI(
    title=SERVICE_NAME,
    description="Typed access to the legacy game server's level browser and hall of fame.",
    version=API_VERSION,
)

UNSECURED_PATHS = {"/", "/health", "/api/v1/status"}

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests with timing and response status."""
    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000

    # Log request details
    logger = logging.getLogger("levelboard.access")
    client_host = request.client.host if request.client else "-"
    logger.info(
        f"{client_host} {request.method} {request.url.path} "
        f"-> {response.status_code} ({process_time:.1f}ms)"
    )

    return response

app.include_router(system.router)
app.include_router(auth.router)
app.include_router(hall_of_fame.router)
app.include_router(levels.router)


def custom_openapi():
    """Generate OpenAPI schema with consistent security defaults."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=API_VERSION,
        description=app.description,
        routes=app.routes,
    )

    security_schemes = openapi_schema.setdefault("components", {}).setdefault("securitySchemes", {})
    security_schemes.setdefault(
        "HTTPBearer",
        {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "API Key",
            "description": "All endpoints (except status, health, and root) require a Bearer API key.",
        },
    )

    for path, methods in openapi_schema.get("paths", {}).items():
        if path in UNSECURED_PATHS:
            continue
        for method in methods.values():
            method.setdefault("security", [{"HTTPBearer": []}])

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi

__all__ = ["app", "UNSECURED_PATHS"]


def _error_content(code: int, message) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "timestamp": datetime.utcnow().isoformat(),
        }
    }


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Return consistent HTTP error responses."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_content(exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures in the shared error envelope."""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=_error_content(422, errors),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler to avoid leaking stack traces."""
    logging.getLogger("levelboard.errors").exception(
        f"Unhandled error on {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_content(500, "Internal server error"),
    )


if __name__ == "__main__":
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", settings.port)),
        reload=False,
        log_level=settings.log_level.lower(),
    )
