"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses:
the gateway endpoint, the router and the resource controllers.
"""

from src.presentation import controllers, http
from src.presentation.api import router as api_router

__all__ = ["api_router", "controllers", "http"]
