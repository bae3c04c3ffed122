"""FastAPI application for the Password Entropy REST API.

Passwords travel in request bodies, so production deployments should set
REQUIRE_HTTPS=true. Every response is marked uncacheable since it reveals
how strong a secret is.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from entropy import configure_logging
from entropy.config import CORS_ORIGINS, REQUIRE_HTTPS
from api.dependencies import get_engine, limiter
from api.routes import evaluate_router, health_router


logger = logging.getLogger(__name__)

# Reachable over plain HTTP so load balancers can check liveness
HTTPS_EXEMPT_PATHS = frozenset({"/", "/health"})

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Content-Security-Policy": "default-src 'self'; frame-ancestors 'none'",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store, no-cache, must-revalidate, private",
    "Pragma": "no-cache",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    engine = get_engine()
    logger.info(
        "API started: %d blacklist entries, HTTPS %s",
        len(engine.config.blacklist),
        "required" if REQUIRE_HTTPS else "optional",
    )
    yield
    logger.info("API shutting down")


app = FastAPI(
    title="Password Entropy API",
    description="Estimates password entropy and maps it onto six strength tiers.",
    version="1.0.0",
    lifespan=lifespan
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


def _is_https(request: Request) -> bool:
    """True if the request arrived over TLS, directly or via a reverse proxy."""
    if request.url.scheme == "https":
        return True
    return request.headers.get("X-Forwarded-Proto", "").lower() == "https"


@app.middleware("http")
async def guard_transport(request: Request, call_next) -> Response:
    """Reject plain HTTP when required, and harden every response."""
    if REQUIRE_HTTPS and request.url.path not in HTTPS_EXEMPT_PATHS and not _is_https(request):
        logger.warning("Rejected plain HTTP request to %s", request.url.path)
        response = JSONResponse(
            status_code=403,
            content={
                "detail": "Passwords must be submitted over HTTPS.",
                "error": "https_required",
            },
        )
    else:
        response = await call_next(request)

    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
    max_age=600,
)

app.include_router(health_router)
app.include_router(evaluate_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
