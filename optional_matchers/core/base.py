"""
OptionalMatcher — базовый протокол matcher'ов над optional-значениями

Контракт matcher'а (PyHamcrest Matcher):
- matches(item)                        → bool, чистая функция от item
- describe_to(description)             → описание ожидаемого условия
- describe_mismatch(item, description) → описание фактического расхождения

Базовый класс добавляет к BaseMatcher:
1. Общий набор литералов (MatcherWording) для всех описаний
2. Защиту предусловия describe_mismatch: вызов на совпадающем item не падает,
   а оставляет описание пустым и пишет warning в лог

Подклассы реализуют _matches, describe_to и describe_mismatch_safely.
"""

import logging
from typing import Any, Optional, TypeVar

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from optional_matchers.core.wording import DEFAULT_WORDING, MatcherWording

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OptionalMatcher(BaseMatcher[Optional[T]]):
    """Базовый matcher для typing.Optional[T]: None — Empty, иначе Present."""

    def __init__(self, wording: Optional[MatcherWording] = None) -> None:
        """
        Args:
            wording: Литералы описаний (default: DEFAULT_WORDING)
        """
        self.wording = wording if wording is not None else DEFAULT_WORDING

    def describe_mismatch(self, item: Optional[T], mismatch_description: Description) -> None:
        """
        Описание расхождения для item, не прошедшего matches.

        Если item на самом деле совпадает, описание остаётся пустым.

        Args:
            item: Проверенное optional-значение
            mismatch_description: Описание, в которое дописывается текст
        """
        if self._matches(item):
            logger.warning(
                "describe_mismatch called on a matching item for %s: %r",
                type(self).__name__,
                item,
            )
            return

        self.describe_mismatch_safely(item, mismatch_description)

    def describe_mismatch_safely(self, item: Any, mismatch_description: Description) -> None:
        """Описание расхождения; вызывается только для несовпавшего item."""
        raise NotImplementedError("describe_mismatch_safely")
