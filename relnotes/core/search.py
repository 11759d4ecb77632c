"""
Search over parsed releases.

Filtering never touches the collection it is given; each call builds a
new list, so it is safe to run on every keystroke.
"""

from typing import Iterable, List, Optional

from .models import Release


def release_matches(release: Release, query: str) -> bool:
    """Case-insensitive substring match against the version and every change."""
    query = query.lower()

    if query in release.version.lower():
        return True

    return any(query in change.lower() for change in release.changes)


def filter_releases(releases: Iterable[Release], query: Optional[str]) -> List[Release]:
    """
    Return the releases matching a search query, in their original order.

    An empty or missing query matches everything.
    """
    if not query:
        return list(releases)

    return [release for release in releases if release_matches(release, query)]
