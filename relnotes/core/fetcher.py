"""
Changelog retrieval.

Downloads the raw changelog document, or reads it from disk.
"""

import requests

from ..config import DEFAULT_CHANGELOG_URL, DEFAULT_TIMEOUT


class ChangelogFetchError(Exception):
    """The changelog document could not be retrieved."""
    pass


def fetch_changelog(
    url: str = DEFAULT_CHANGELOG_URL,
    timeout: float = DEFAULT_TIMEOUT
) -> str:
    """
    Download a changelog document.

    Args:
        url: URL of the raw markdown document
        timeout: Request timeout in seconds

    Returns:
        Full document text

    Raises:
        ChangelogFetchError: On connection problems or a non-success status
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise ChangelogFetchError(f"Failed to fetch changelog: {e}") from e

    if not response.ok:
        raise ChangelogFetchError(
            f"Failed to fetch changelog: {response.status_code} {response.reason}"
        )

    # utf-8-sig drops a leading byte order mark
    try:
        return response.content.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise ChangelogFetchError(f"Failed to decode changelog: {e}") from e


def read_changelog(path: str) -> str:
    """
    Read a changelog document from a local file.

    Raises:
        ChangelogFetchError: If the file cannot be read
    """
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ChangelogFetchError(f"Failed to read changelog {path}: {e}") from e
