"""
Changelog parser for the Release Notes Viewer.

Turns a markdown changelog into an ordered list of Release records.
Only two line shapes carry meaning, once surrounding whitespace is
stripped:

    ## 1.2.3 (anything else)   opens a new release
    - some change text        adds an entry to the open release

Every other line is skipped. Releases keep document order.
"""

import re
from typing import Iterable, List, Optional

from .models import Release


VERSION_HEADER_PREFIX = '## '
BULLET_PREFIX = '- '
BYTE_ORDER_MARK = '\ufeff'

# Leading dotted triple, e.g. "1.2.3" in "1.2.3-beta (2025-01-01)"
VERSION_PATTERN = re.compile(r'^[0-9]+\.[0-9]+\.[0-9]+')


def parse_version(line: str) -> Optional[str]:
    """
    Return the version of a version header line, or None.

    The version is everything after the heading marker, so prerelease
    suffixes and dates stay part of it.
    """
    line = line.strip()
    if not line.startswith(VERSION_HEADER_PREFIX):
        return None

    remainder = line[len(VERSION_HEADER_PREFIX):]
    if not VERSION_PATTERN.match(remainder):
        return None

    return remainder.strip()


def is_version_header(line: str) -> bool:
    """Check whether a line opens a new release."""
    return parse_version(line) is not None


def parse_change_entry(line: str) -> Optional[str]:
    """Return the text of a bullet line, or None for non-bullets and bare bullets."""
    line = line.strip()
    if not line.startswith(BULLET_PREFIX):
        return None

    text = line[len(BULLET_PREFIX):].strip()
    return text or None


def parse_changelog(markdown: str) -> List[Release]:
    """
    Parse changelog markdown into releases.

    Bullets before the first version header have no release to attach to
    and are dropped. An empty document yields an empty list.

    Args:
        markdown: Full changelog text

    Returns:
        Releases in the order they appear in the document
    """
    releases: List[Release] = []
    version: Optional[str] = None
    changes: List[str] = []

    # A leading byte order mark would hide the first header
    for line in (markdown or '').lstrip(BYTE_ORDER_MARK).split('\n'):
        header_version = parse_version(line)

        if header_version is not None:
            if version is not None:
                releases.append(Release(version, changes))
            version = header_version
            changes = []
        elif version is not None:
            change = parse_change_entry(line)
            if change is not None:
                changes.append(change)

    # The last release has no following header to close it
    if version is not None:
        releases.append(Release(version, changes))

    return releases


def to_markdown(releases: Iterable[Release]) -> str:
    """
    Serialize releases back to a header/bullet changelog skeleton.

    Parsing the output yields releases equal to the input.
    """
    blocks = []
    for release in releases:
        lines = [f"{VERSION_HEADER_PREFIX}{release.version}"]
        lines.extend(f"{BULLET_PREFIX}{change}" for change in release.changes)
        blocks.append('\n'.join(lines))

    if not blocks:
        return ''

    return '\n\n'.join(blocks) + '\n'
