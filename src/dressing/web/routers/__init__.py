"""API routers for the REST API."""

from dressing.web.routers.quote import router as quote_router
from dressing.web.routers.rates import router as rates_router

__all__ = [
    "quote_router",
    "rates_router",
]
