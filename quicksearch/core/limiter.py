"""Rate limiter instance for SlowAPI.

Shared so main (app.state.limiter) and route modules use the same instance
without circular imports. The limit string is read from settings on each
request so tests can override it.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from quicksearch.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def suggestions_limit() -> str:
    """Return the configured rate limit for the suggestions route."""
    return get_settings().suggestions_rate_limit


limit_suggestions = limiter.limit(suggestions_limit)
