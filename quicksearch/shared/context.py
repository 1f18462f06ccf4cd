"""Request context management using contextvars.

Holds request-scoped identifiers (request ID, correlation ID) so log records
and error responses can carry them without passing them through every call.

Usage:
    set_request_context(request_id="abc", correlation_id="abc")
    request_id = get_request_id()
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


@dataclass(frozen=True)
class RequestContextTokens:
    """Tokens returned by set_request_context, used to restore the previous values."""

    request_id: Token
    correlation_id: Token


def set_request_context(
    request_id: str | None, correlation_id: str | None
) -> RequestContextTokens:
    """Set request and correlation IDs for the current task; returns reset tokens."""
    return RequestContextTokens(
        request_id=_request_id.set(request_id),
        correlation_id=_correlation_id.set(correlation_id),
    )


def reset_request_context(tokens: RequestContextTokens) -> None:
    """Restore the IDs that were current before set_request_context."""
    _request_id.reset(tokens.request_id)
    _correlation_id.reset(tokens.correlation_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()


def get_correlation_id() -> str | None:
    """Return the current correlation ID, or None outside a request."""
    return _correlation_id.get()
