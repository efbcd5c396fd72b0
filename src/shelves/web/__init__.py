"""FastAPI REST API for divider editing sessions.

Usage:
    uvicorn shelves.web:app --reload
"""

from shelves.web.app import app, create_app

__all__ = ["app", "create_app"]
