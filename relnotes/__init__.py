"""
Release Notes Viewer - searchable, categorized changelog history.
"""

__version__ = "1.0.0"
