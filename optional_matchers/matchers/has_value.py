"""
HasValue — составной matcher значения внутри optional

Сначала проверяет наличие значения (через PresenceMatcher), затем делегирует
проверку самого значения внутреннему matcher'у. Внутренний matcher может быть
любым PyHamcrest Matcher'ом, в том числе другим HasValue, поэтому композиция
вкладывается на произвольную глубину.

Описание расхождения ровно в двух ветках:
1. optional пуст                 → "was <Empty>"
2. значение не прошло matcher    → "was <Present> and " + описание внутреннего matcher'а
"""

from typing import Optional, TypeVar

from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher

from optional_matchers.core.base import OptionalMatcher
from optional_matchers.core.wording import MatcherWording
from optional_matchers.matchers.presence import PresenceMatcher

T = TypeVar("T")


class HasValue(OptionalMatcher[T]):
    """
    Matcher для optional, значение которого удовлетворяет внутреннему matcher'у.

    Наличие значения проверяется только через вложенный PresenceMatcher.
    Внутренний matcher никогда не вызывается для пустого optional.
    """

    def __init__(self, matcher: Matcher[T], wording: Optional[MatcherWording] = None) -> None:
        """
        Args:
            matcher: Matcher для значения внутри optional
            wording: Литералы описаний (default: DEFAULT_WORDING)
        """
        super().__init__(wording)
        self.presence_matcher = PresenceMatcher(self.wording)
        self.matcher = matcher

    def _matches(self, item: Optional[T]) -> bool:
        return self.presence_matcher.matches(item) and self.matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        self.presence_matcher.describe_to(description)
        description.append_text(self.wording.conjunction)
        self.matcher.describe_to(description)

    def describe_mismatch_safely(self, item: Optional[T], mismatch_description: Description) -> None:
        if not self.presence_matcher.matches(item):
            mismatch_description.append_text(self.wording.was_empty())
        else:
            mismatch_description.append_text(self.wording.was_present() + self.wording.conjunction)
            self.matcher.describe_mismatch(item, mismatch_description)
