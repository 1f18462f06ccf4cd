"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes use
dependencies from quicksearch.api.v1.dependencies.
"""

from fastapi import APIRouter

from quicksearch.api.v1.endpoints import components, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(components.router, prefix="/components", tags=["components"])
