"""
Data model for parsed changelog releases.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .classifier import DISPLAY_ORDER, categorize_changes


@dataclass(frozen=True)
class Release:
    """
    One version section of a changelog.

    Built once per parse pass and never mutated afterwards. The category
    grouping is always derived from `changes` and exposed read-only, so
    it partitions `changes` for the lifetime of the record.
    """
    version: str
    changes: Tuple[str, ...] = ()
    categorized_changes: Mapping[str, Tuple[str, ...]] = field(
        init=False, compare=False, repr=False
    )

    def __post_init__(self):
        if not self.version:
            raise ValueError("Release version must not be empty")

        object.__setattr__(self, 'changes', tuple(self.changes))

        grouped = categorize_changes(self.changes)
        object.__setattr__(self, 'categorized_changes', MappingProxyType({
            category: tuple(items) for category, items in grouped.items()
        }))

    @property
    def change_count(self) -> int:
        return len(self.changes)

    def category_counts(self) -> Dict[str, int]:
        """Number of entries per category, zero for absent ones."""
        return {
            category: len(self.categorized_changes.get(category, ()))
            for category in DISPLAY_ORDER
        }

    def to_dict(self) -> Dict:
        """Convert to dictionary for API responses."""
        categorized: Dict[str, List[str]] = {
            category: list(items)
            for category, items in self.categorized_changes.items()
        }
        return {
            'version': self.version,
            'changes': list(self.changes),
            'categorized_changes': categorized,
            'change_count': self.change_count,
        }
