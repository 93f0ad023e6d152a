"""FastAPI application configuration.

Main entry point for the Password Breach Check REST API.
The lifespan hook performs the process-wide transport setup and teardown
around the lifetime of the service.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from breachcheck import deinit_environment, init_environment
from breachcheck.config import REQUIRE_HTTPS
from breachcheck.siem import close_siem_log
from api.dependencies import limiter
from api.routes import health_router, tools_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    init_environment()
    yield
    deinit_environment()
    close_siem_log()


app = FastAPI(
    title="Password Breach Check API",
    description="""
    Password breach checking API with:
    - k-Anonymity range queries (only a 5-character SHA-1 prefix leaves the server)
    - Retries with fixed backoff toward the breach corpus
    - Binary strength signal (any breach collapses strength to 0)
    - SIEM-compatible logging
    - Rate limiting
    """,
    version="1.0.0",
    lifespan=lifespan
)

# Attach rate limiter to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# HTTPS enforcement middleware
@app.middleware("http")
async def enforce_https(request: Request, call_next) -> Response:
    """Enforce HTTPS connections when REQUIRE_HTTPS is enabled.

    Passwords travel in request bodies, so plain HTTP exposes them to
    anyone on the network path. Health checks are exempted to allow load
    balancer probes.
    """
    if REQUIRE_HTTPS:
        if request.url.path in ["/", "/health"]:
            return await call_next(request)

        # X-Forwarded-Proto is set by reverse proxies (nginx, traefik, etc.)
        forwarded_proto = request.headers.get("X-Forwarded-Proto", "")
        is_https = (
            request.url.scheme == "https" or
            forwarded_proto.lower() == "https"
        )

        if not is_https:
            return JSONResponse(
                status_code=403,
                content={
                    "detail": "HTTPS required. This API requires secure connections.",
                    "error": "https_required"
                }
            )

    return await call_next(request)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Add security headers to all responses."""
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none'"
    response.headers["Referrer-Policy"] = "no-referrer"

    # Prevent caching of responses derived from passwords
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"

    return response


# Register routers
app.include_router(health_router)
app.include_router(tools_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
