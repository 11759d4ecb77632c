"""
Command line interface for the Release Notes Viewer.
"""

from .commands import cli

__all__ = ['cli']
