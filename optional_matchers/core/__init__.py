"""
Core primitives for optional-value matchers.

Presence check, message wording and matcher base class. Independent
of any concrete matcher.
"""

from optional_matchers.core.base import OptionalMatcher
from optional_matchers.core.presence import is_value_present
from optional_matchers.core.wording import DEFAULT_WORDING, MatcherWording

__all__ = [
    # Base
    "OptionalMatcher",
    # Presence
    "is_value_present",
    # Wording
    "DEFAULT_WORDING",
    "MatcherWording",
]
