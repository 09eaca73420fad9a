"""
Фабричные функции optional-matcher'ов

Публичная поверхность библиотеки:
- is_present()          → optional содержит значение
- is_empty()            → optional пуст
- has_value(operand)    → optional содержит значение, равное operand (==)
- has_value(matcher)    → optional содержит значение, удовлетворяющее matcher'у

Каждый вызов строит новый matcher. Результат — обычный PyHamcrest Matcher,
пригодный для hamcrest.assert_that:

    assert_that(find_user("alice"), has_value(has_property("name", "alice")))
"""

import logging
from typing import Optional, TypeVar, Union

from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from hamcrest.core.matcher import Matcher

from optional_matchers.core.wording import MatcherWording
from optional_matchers.matchers.has_value import HasValue
from optional_matchers.matchers.presence import EmptyMatcher, PresenceMatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_present(*, wording: Optional[MatcherWording] = None) -> PresenceMatcher:
    """
    Matcher, совпадающий, когда optional содержит значение.

        assert_that("dummy value", is_present())

    Args:
        wording: Литералы описаний (default: DEFAULT_WORDING)

    Returns:
        PresenceMatcher
    """
    return PresenceMatcher(wording)


def is_empty(*, wording: Optional[MatcherWording] = None) -> EmptyMatcher:
    """
    Matcher, совпадающий, когда optional пуст.

        assert_that(None, is_empty())

    Args:
        wording: Литералы описаний (default: DEFAULT_WORDING)

    Returns:
        EmptyMatcher
    """
    return EmptyMatcher(wording)


def has_value(
    match: Union[Matcher[T], T], *, wording: Optional[MatcherWording] = None
) -> HasValue[T]:
    """
    Matcher, совпадающий, когда optional содержит подходящее значение.

    Если match — PyHamcrest Matcher, он проверяет значение напрямую.
    Иначе match оборачивается в equal_to и значение сравнивается через ==.
    Выбор делается через isinstance(match, Matcher): объект с методами
    matches / describe_to / describe_mismatch, но не унаследованный от
    hamcrest Matcher, считается литералом и тоже оборачивается в equal_to.

    has_value(None) не совпадает ни с одним optional: None — пустое
    состояние, и на нём расхождение описывается как 'was <Empty>'.

        assert_that("dummy value", has_value("dummy value"))
        assert_that("dummy value", has_value(starts_with("dummy")))

    Args:
        match: Ожидаемое значение или matcher для значения
        wording: Литералы описаний (default: DEFAULT_WORDING)

    Returns:
        HasValue
    """
    if isinstance(match, Matcher):
        logger.debug("has_value: using matcher %s", match)
    else:
        logger.debug("has_value: using equality with %r", match)

    return HasValue(wrap_matcher(match), wording)
