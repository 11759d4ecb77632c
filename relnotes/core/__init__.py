"""
Core logic for the Release Notes Viewer.

This module provides:
- parse_changelog: Markdown changelog to Release records
- ChangeClassifier: Keyword categorization of change entries
- ReleaseStore: Holder of the current release collection
"""

# Lazy imports keep `requests` out of pure parsing use:
#   from relnotes.core.parser import parse_changelog
#   from relnotes.core.classifier import ChangeClassifier, categorize_changes
#   from relnotes.core.store import ReleaseStore

__all__ = [
    'Release',
    'parse_changelog',
    'ChangeClassifier',
    'categorize_changes',
    'filter_releases',
    'ReleaseStore',
]


def __getattr__(name):
    """Lazy import implementation."""
    if name == 'Release':
        from .models import Release
        return Release
    elif name == 'parse_changelog':
        from .parser import parse_changelog
        return parse_changelog
    elif name == 'ChangeClassifier':
        from .classifier import ChangeClassifier
        return ChangeClassifier
    elif name == 'categorize_changes':
        from .classifier import categorize_changes
        return categorize_changes
    elif name == 'filter_releases':
        from .search import filter_releases
        return filter_releases
    elif name == 'ReleaseStore':
        from .store import ReleaseStore
        return ReleaseStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
