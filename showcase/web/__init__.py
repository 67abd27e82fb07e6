"""Web layer for showcase package."""

from .app import create_app
from .auth import AdminTokenCheck

__all__ = ["create_app", "AdminTokenCheck"]
