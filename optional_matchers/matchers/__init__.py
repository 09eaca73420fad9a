"""
Optional-value matchers and their factories.
"""

from optional_matchers.matchers.factories import has_value, is_empty, is_present
from optional_matchers.matchers.has_value import HasValue
from optional_matchers.matchers.presence import EmptyMatcher, PresenceMatcher

__all__ = [
    # Matchers
    "PresenceMatcher",
    "EmptyMatcher",
    "HasValue",
    # Factories
    "is_present",
    "is_empty",
    "has_value",
]
