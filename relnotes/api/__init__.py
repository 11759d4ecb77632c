"""
REST API layer for the Release Notes Viewer.

This module provides Flask blueprints for:
- /api/releases - Parsed releases, search, refresh and status
"""

from .app import create_app

__all__ = ['create_app']
