"""
Keyword classifier for changelog entries.

Every entry is assigned to exactly one category. Rules are checked in
CATEGORY_RULES order, the first keyword found in the lowercased entry
wins, and entries matching nothing fall back to IMPROVEMENTS.

Matching is plain substring containment, so "fix" also hits "fixture".
"""

from typing import Dict, Iterable, List, Sequence, Tuple


NEW_FEATURES = 'NEW FEATURES'
IMPROVEMENTS = 'IMPROVEMENTS'
BUG_FIXES = 'BUG FIXES'
BREAKING_CHANGES = 'BREAKING CHANGES'

# Match priority, top to bottom
CATEGORY_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (NEW_FEATURES, (
        'added', 'new', 'introduce', 'released hooks', 'released mcp', 'support for',
    )),
    (BUG_FIXES, (
        'fixed', 'fix', 'resolved', 'resolve', 'bug',
    )),
    (BREAKING_CHANGES, (
        'breaking', 'removed', 'deprecated', 'breaking change',
    )),
    (IMPROVEMENTS, (
        'improved', 'improve', 'enhanced', 'enhance', 'changed', 'updated',
        'update', 'better', 'optimized',
    )),
)

# Presentation order of the categorized mapping
DISPLAY_ORDER: Tuple[str, ...] = (
    NEW_FEATURES,
    IMPROVEMENTS,
    BUG_FIXES,
    BREAKING_CHANGES,
)

DEFAULT_CATEGORY = IMPROVEMENTS


class ChangeClassifier:
    """Assigns change entries to categories using an ordered keyword table."""

    def __init__(
        self,
        rules: Sequence[Tuple[str, Sequence[str]]] = CATEGORY_RULES,
        default: str = DEFAULT_CATEGORY,
        display_order: Sequence[str] = DISPLAY_ORDER
    ):
        """
        Initialize the classifier.

        Args:
            rules: (category, keywords) pairs in match priority order
            default: Category for entries that match no keyword
            display_order: Key order of the mapping returned by categorize()

        Raises:
            ValueError: If a rule or the default names a category that is
                missing from display_order
        """
        self.rules = tuple(
            (category, tuple(keyword.lower() for keyword in keywords))
            for category, keywords in rules
        )
        self.default = default
        self.display_order = tuple(display_order)

        known = set(self.display_order)
        for category in [c for c, _ in self.rules] + [default]:
            if category not in known:
                raise ValueError(f"Category {category!r} is not in display_order")

    def classify(self, change: str) -> str:
        """Return the category for a single change entry."""
        change_lower = change.lower()
        for category, keywords in self.rules:
            if any(keyword in change_lower for keyword in keywords):
                return category
        return self.default

    def categorize(self, changes: Iterable[str]) -> Dict[str, List[str]]:
        """
        Group change entries by category.

        The result is keyed in display order, keeps the input order within
        each category and omits categories without entries.
        """
        grouped: Dict[str, List[str]] = {category: [] for category in self.display_order}

        for change in changes:
            grouped[self.classify(change)].append(change)

        return {category: items for category, items in grouped.items() if items}


_default_classifier = ChangeClassifier()


def classify_change(change: str) -> str:
    """Classify one entry with the default rule table."""
    return _default_classifier.classify(change)


def categorize_changes(changes: Iterable[str]) -> Dict[str, List[str]]:
    """Categorize entries with the default rule table."""
    return _default_classifier.categorize(changes)
