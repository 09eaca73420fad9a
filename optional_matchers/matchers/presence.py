"""
Presence / Empty — листовые matcher'ы наличия значения

PresenceMatcher: совпадает, если optional содержит значение.
EmptyMatcher:    совпадает, если optional пуст (логическое отрицание Presence).

Оба matcher'а тотальны над любыми optional-значениями и не имеют состояния
кроме wording.
"""

from typing import Any, Optional

from hamcrest.core.description import Description

from optional_matchers.core.base import OptionalMatcher
from optional_matchers.core.presence import is_value_present


class PresenceMatcher(OptionalMatcher[Any]):
    """Matcher для optional, содержащего значение: '<Present>'."""

    def _matches(self, item: Optional[Any]) -> bool:
        return is_value_present(item)

    def describe_to(self, description: Description) -> None:
        description.append_text(self.wording.present)

    def describe_mismatch_safely(self, item: Optional[Any], mismatch_description: Description) -> None:
        # Несовпадение возможно только для пустого optional
        mismatch_description.append_text(self.wording.was_empty())


class EmptyMatcher(OptionalMatcher[Any]):
    """Matcher для пустого optional: '<Empty>'."""

    def _matches(self, item: Optional[Any]) -> bool:
        return not is_value_present(item)

    def describe_to(self, description: Description) -> None:
        description.append_text(self.wording.empty)

    def describe_mismatch_safely(self, item: Optional[Any], mismatch_description: Description) -> None:
        mismatch_description.append_text(self.wording.was_present_with_value(item))
