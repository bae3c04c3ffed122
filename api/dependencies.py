"""FastAPI dependencies shared by the route modules.

Provides the scoring engine, the rate limiter and client IP extraction.
Includes trusted proxy validation to prevent X-Forwarded-For spoofing.
"""

from functools import lru_cache

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from entropy import ScoringEngine, config_from_environment
from entropy.config import TRUSTED_PROXIES


# Rate limiter configuration
# Uses client IP for rate limit tracking
limiter = Limiter(key_func=get_remote_address, default_limits=["100/minute"])


@lru_cache(maxsize=1)
def get_engine() -> ScoringEngine:
    """Dependency returning the engine built from environment settings.

    Built once per process; the engine is immutable and shared by all
    requests without locking.
    """
    return ScoringEngine(config_from_environment())


def get_client_ip(request: Request) -> str:
    """Extract client IP from request with trusted proxy validation.

    Only trusts the X-Forwarded-For header if the direct connection comes
    from a configured trusted proxy.

    Args:
        request: FastAPI request object

    Returns:
        Client IP address (from X-Forwarded-For if trusted proxy, else direct)
    """
    direct_ip = request.client.host if request.client else "unknown"

    if TRUSTED_PROXIES and direct_ip in TRUSTED_PROXIES:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # Take the first IP in the chain (original client)
            client_ip = forwarded.split(",")[0].strip()
            if client_ip and ("." in client_ip or ":" in client_ip):
                return client_ip

    return direct_ip
