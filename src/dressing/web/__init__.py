"""FastAPI REST API for dressing quotes.

Usage:
    uvicorn dressing.web:app --reload
"""

from dressing.web.app import app, create_app

__all__ = ["app", "create_app"]
