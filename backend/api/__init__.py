"""
Taskboard API package.

Provides the FastAPI application for the multi-tenant task service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
