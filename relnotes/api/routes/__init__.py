"""
API route blueprints for the Release Notes Viewer.
"""

from .releases import releases_bp

__all__ = [
    'releases_bp',
]
