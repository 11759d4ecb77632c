"""
In-memory holder for the current release collection.

The collection is rebuilt from scratch on every refresh and swapped in
under a lock, so readers in other threads see either the old list or the
new one, never a partial result.
"""

import threading
from datetime import datetime
from typing import Optional, List, Dict

from ..config import get_changelog_url, get_timeout
from .classifier import DISPLAY_ORDER
from .fetcher import ChangelogFetchError, fetch_changelog, read_changelog
from .models import Release
from .parser import parse_changelog
from .search import filter_releases


FAILURE_MESSAGE = "Failed to load release notes. Please try again later."


class ReleaseStore:
    """
    Holds the releases parsed from the most recent changelog load.

    Keeps a short activity log of loads and failures.
    """

    MAX_LOGS = 100

    def __init__(self, config: Optional[dict] = None):
        """Initialize an empty store."""
        self.config = config or {}
        self._lock = threading.Lock()
        self._releases: List[Release] = []
        self._error: Optional[str] = None
        self._source: Optional[str] = None
        self._refreshed_at: Optional[datetime] = None
        self._logs: List[str] = []

    @property
    def releases(self) -> List[Release]:
        """Snapshot of the current releases."""
        with self._lock:
            return list(self._releases)

    @property
    def error(self) -> Optional[str]:
        with self._lock:
            return self._error

    @property
    def refreshed_at(self) -> Optional[datetime]:
        with self._lock:
            return self._refreshed_at

    @property
    def status(self) -> dict:
        """Get current store status."""
        with self._lock:
            return {
                'loaded': self._refreshed_at is not None,
                'source': self._source,
                'refreshed_at': self._refreshed_at.isoformat() if self._refreshed_at else None,
                'release_count': len(self._releases),
                'error': self._error,
                'logs': self._logs[-50:],
            }

    def add_log(self, message: str):
        """Add a log message."""
        with self._lock:
            timestamp = datetime.now().strftime("%H:%M:%S")
            self._logs.append(f"[{timestamp}] {message}")
            if len(self._logs) > self.MAX_LOGS:
                self._logs = self._logs[-self.MAX_LOGS:]

    def refresh(self) -> List[Release]:
        """
        Fetch the configured changelog and replace the collection.

        On failure the collection is emptied and the error recorded.

        Returns:
            The newly parsed releases

        Raises:
            ChangelogFetchError: If the document cannot be retrieved
        """
        url = get_changelog_url(self.config)
        self.add_log(f"Fetching changelog from {url}")

        try:
            markdown = fetch_changelog(url, timeout=get_timeout(self.config))
        except ChangelogFetchError as e:
            self._fail(str(e), source=url)
            raise

        return self.load_text(markdown, source=url)

    def load_file(self, path: str) -> List[Release]:
        """
        Load releases from a local changelog file.

        Raises:
            ChangelogFetchError: If the file cannot be read
        """
        self.add_log(f"Reading changelog from {path}")

        try:
            markdown = read_changelog(path)
        except ChangelogFetchError as e:
            self._fail(str(e), source=path)
            raise

        return self.load_text(markdown, source=path)

    def load_text(self, markdown: str, source: Optional[str] = None) -> List[Release]:
        """Parse a changelog document and replace the collection with it."""
        releases = parse_changelog(markdown)

        with self._lock:
            self._releases = releases
            self._error = None
            self._source = source
            self._refreshed_at = datetime.now()

        self.add_log(f"Parsed {len(releases)} releases")
        return list(releases)

    def _fail(self, error: str, source: Optional[str] = None):
        with self._lock:
            self._releases = []
            self._error = error
            self._source = source
            self._refreshed_at = datetime.now()
        self.add_log(f"ERROR: {error}")

    def get_release(self, version: str) -> Optional[Release]:
        """Find a release by its exact version string."""
        return next((r for r in self.releases if r.version == version), None)

    def search(self, query: Optional[str]) -> List[Release]:
        """Releases whose version or changes contain the query."""
        return filter_releases(self.releases, query)

    def stats(self) -> Dict:
        """Summary statistics over the current collection."""
        releases = self.releases
        categories = {category: 0 for category in DISPLAY_ORDER}

        for release in releases:
            for category, count in release.category_counts().items():
                categories[category] += count

        return {
            'total_releases': len(releases),
            'total_changes': sum(r.change_count for r in releases),
            'latest_version': releases[0].version if releases else None,
            'categories': categories,
        }

