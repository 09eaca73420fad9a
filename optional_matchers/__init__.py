"""
PyHamcrest matchers for optional values.

An optional is any typing.Optional[T] value: None is empty, anything else is
present. Provides is_present(), is_empty() and has_value() for use with
hamcrest.assert_that.
"""

import logging

from optional_matchers.core import (
    DEFAULT_WORDING,
    MatcherWording,
    OptionalMatcher,
    is_value_present,
)
from optional_matchers.matchers import (
    EmptyMatcher,
    HasValue,
    PresenceMatcher,
    has_value,
    is_empty,
    is_present,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Factories
    "is_present",
    "is_empty",
    "has_value",
    # Matchers
    "OptionalMatcher",
    "PresenceMatcher",
    "EmptyMatcher",
    "HasValue",
    # Core
    "is_value_present",
    "MatcherWording",
    "DEFAULT_WORDING",
]
