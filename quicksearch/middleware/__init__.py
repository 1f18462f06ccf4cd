"""HTTP middleware: timeout and request/correlation IDs.

Applied in main app; order matters (first added = outermost).
"""

from quicksearch.middleware.request_context import RequestContextMiddleware
from quicksearch.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestContextMiddleware", "TimeoutMiddleware"]
