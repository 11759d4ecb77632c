"""
HTML formatting of change entries for the web view.

Only inline code spans and [label](url) links are converted; everything
else is escaped and shown as text. Classification never sees this output.
"""

import re
from typing import Optional

from markupsafe import Markup, escape


LINK_PATTERN = re.compile(r'\[([^\]]+)\]\(([^\)]+)\)')
CODE_PATTERN = re.compile(r'`([^`]+)`')
SAFE_URL_PATTERN = re.compile(r'^(https?://|/|#)', re.IGNORECASE)

# Tags are never highlighted; entities may be, but only whole
_TAG_PATTERN = re.compile(r'(<[^>]+>)')
_ENTITY_PATTERN = re.compile(r'&#?\w+;')


def _render_link(match: re.Match) -> str:
    label, url = match.group(1), match.group(2)
    if not SAFE_URL_PATTERN.match(url):
        return label
    return f'<a href="{url}" target="_blank" rel="noopener">{label}</a>'


def _highlight_text(text: str, pattern: re.Pattern) -> str:
    """Wrap matches in one tag-free run of escaped text."""
    entities = [m.span() for m in _ENTITY_PATTERN.finditer(text)]

    def splits_entity(index: int) -> bool:
        return any(start < index < end for start, end in entities)

    out = []
    copied = 0
    match = pattern.search(text)

    while match:
        start, end = match.span()
        if splits_entity(start) or splits_entity(end):
            match = pattern.search(text, start + 1)
            continue

        out.append(text[copied:start])
        out.append(f'<span class="highlight">{match.group(0)}</span>')
        copied = end
        match = pattern.search(text, end)

    out.append(text[copied:])
    return ''.join(out)


def highlight_query(html_text: str, query: str) -> str:
    """
    Wrap case-insensitive occurrences of query in highlight spans.

    The query is escaped like the text, so "<b>" finds "&lt;b&gt;".
    A match may contain whole entities but never starts or ends inside
    one, and text inside tags is left alone.

    Args:
        html_text: Already escaped HTML
        query: Raw search text

    Returns:
        HTML with matches wrapped
    """
    if not query:
        return html_text

    pattern = re.compile(re.escape(str(escape(query))), re.IGNORECASE)
    parts = _TAG_PATTERN.split(html_text)

    # Odd indices are the captured tags
    for i in range(0, len(parts), 2):
        parts[i] = _highlight_text(parts[i], pattern)

    return ''.join(parts)


def format_change_text(text: str, query: Optional[str] = None) -> Markup:
    """
    Render one change entry as safe HTML.

    Args:
        text: Raw change entry
        query: Optional search text to highlight

    Returns:
        Markup ready to be placed in a template
    """
    formatted = str(escape(text))
    formatted = LINK_PATTERN.sub(_render_link, formatted)
    formatted = CODE_PATTERN.sub(r'<code>\1</code>', formatted)

    if query:
        formatted = highlight_query(formatted, query)

    return Markup(formatted)


def category_css_class(category: str) -> str:
    """CSS class for a category heading, e.g. "BUG FIXES" -> "bug-fixes"."""
    return category.lower().replace(' ', '-')
