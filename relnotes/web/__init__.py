"""
Web UI layer for the Release Notes Viewer.

This module provides:
- Jinja2 templates for the release history page
- Static assets (CSS)
- Page rendering routes
"""

from .views import web_bp

__all__ = ['web_bp']
