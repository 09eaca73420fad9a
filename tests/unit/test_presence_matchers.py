"""
Тесты для листовых matcher'ов наличия значения: is_present, is_empty

Проверяет:
1. Семантику matches для Empty (None) и Present (любой не-None объект)
2. Взаимное исключение is_present / is_empty
3. Дословный текст describe_to и describe_mismatch
4. Работу через внешний исполнитель hamcrest.assert_that
5. Защиту предусловия describe_mismatch на совпадающем item
"""

import logging
import re

import pytest
from hamcrest import assert_that
from hamcrest.core.string_description import StringDescription

from optional_matchers import EmptyMatcher, PresenceMatcher, is_empty, is_present


def describe(matcher) -> str:
    """Текст describe_to"""
    description = StringDescription()
    matcher.describe_to(description)
    return str(description)


def mismatch(matcher, item) -> str:
    """Текст describe_mismatch после неуспешного matches"""
    description = StringDescription()
    assert not matcher.matches(item, description)
    return str(description)


# Набор optional-значений: None и "ложные" значения, которые всё равно Present
SUBJECTS = [None, 42, "dummy value", "", 0, False, [], {}, 0.0, object()]


# =============================================================================
# IS_PRESENT
# =============================================================================


class TestIsPresent:
    """Тесты для is_present()"""

    def test_factory_returns_presence_matcher(self) -> None:
        """Фабрика строит PresenceMatcher"""
        assert isinstance(is_present(), PresenceMatcher)

    def test_factory_returns_fresh_instance(self) -> None:
        """Каждый вызов фабрики строит новый matcher"""
        assert is_present() is not is_present()

    def test_present_value_matches(self) -> None:
        """Сценарий: is_present() на Present(42) → True"""
        assert is_present().matches(42)

    def test_empty_does_not_match(self) -> None:
        """is_present() на None → False"""
        assert not is_present().matches(None)

    @pytest.mark.parametrize("value", [0, "", False, [], {}, 0.0])
    def test_falsy_value_is_present(self, value) -> None:
        """Ложные значения — не пустой optional"""
        assert is_present().matches(value)

    def test_describe_to(self) -> None:
        """Ожидание: '<Present>'"""
        assert describe(is_present()) == "<Present>"

    def test_mismatch_on_empty(self) -> None:
        """Сценарий: is_present() на None → 'was <Empty>'"""
        assert mismatch(is_present(), None) == "was <Empty>"

    def test_assert_that_passes(self) -> None:
        """assert_that не падает для Present"""
        assert_that("dummy value", is_present())

    def test_assert_that_reports_failure(self) -> None:
        """assert_that формирует сообщение из expected и mismatch"""
        with pytest.raises(AssertionError, match=re.escape("Expected: <Present>\n     but: was <Empty>")):
            assert_that(None, is_present())

    def test_repeated_matches_are_pure(self) -> None:
        """matches — чистая функция, повторный вызов даёт тот же результат"""
        matcher = is_present()
        results = [matcher.matches(None) for _ in range(3)] + [matcher.matches(1) for _ in range(3)]
        assert results == [False, False, False, True, True, True]


# =============================================================================
# IS_EMPTY
# =============================================================================


class TestIsEmpty:
    """Тесты для is_empty()"""

    def test_factory_returns_empty_matcher(self) -> None:
        """Фабрика строит EmptyMatcher"""
        assert isinstance(is_empty(), EmptyMatcher)

    def test_empty_matches(self) -> None:
        """is_empty() на None → True"""
        assert is_empty().matches(None)

    def test_present_does_not_match(self) -> None:
        """Сценарий: is_empty() на Present('x') → False"""
        assert not is_empty().matches("x")

    def test_describe_to(self) -> None:
        """Ожидание: '<Empty>'"""
        assert describe(is_empty()) == "<Empty>"

    def test_mismatch_reports_value(self) -> None:
        """Сценарий: is_empty() на Present('x') → 'was <Present> with value x'"""
        assert mismatch(is_empty(), "x") == "was <Present> with value x"

    def test_mismatch_uses_str_of_value(self) -> None:
        """Значение выводится через str(), без кавычек"""
        assert mismatch(is_empty(), "dummy value") == "was <Present> with value dummy value"
        assert mismatch(is_empty(), 42) == "was <Present> with value 42"
        assert mismatch(is_empty(), [1, 2]) == "was <Present> with value [1, 2]"

    def test_assert_that_reports_failure(self) -> None:
        """assert_that формирует сообщение с текстом значения"""
        with pytest.raises(
            AssertionError,
            match=re.escape("Expected: <Empty>\n     but: was <Present> with value dummy value"),
        ):
            assert_that("dummy value", is_empty())


# =============================================================================
# ВЗАИМНОЕ ИСКЛЮЧЕНИЕ
# =============================================================================


class TestPresenceComplement:
    """is_present и is_empty — логические отрицания друг друга"""

    @pytest.mark.parametrize("subject", SUBJECTS)
    def test_exactly_one_holds(self, subject) -> None:
        """Для любого optional совпадает ровно один из двух matcher'ов"""
        assert is_present().matches(subject) == (not is_empty().matches(subject))


# =============================================================================
# ПРЕДУСЛОВИЕ DESCRIBE_MISMATCH
# =============================================================================


class TestMismatchPrecondition:
    """describe_mismatch на совпадающем item не падает"""

    def test_is_empty_on_empty_does_not_raise(self, caplog) -> None:
        """is_empty().describe_mismatch(None) — пустое описание и warning"""
        description = StringDescription()
        with caplog.at_level(logging.WARNING, logger="optional_matchers"):
            is_empty().describe_mismatch(None, description)

        assert str(description) == ""
        assert "describe_mismatch called on a matching item" in caplog.text

    def test_is_present_on_present_leaves_description_empty(self, caplog) -> None:
        """is_present().describe_mismatch на Present — пустое описание"""
        description = StringDescription()
        with caplog.at_level(logging.WARNING, logger="optional_matchers"):
            is_present().describe_mismatch("value", description)

        assert str(description) == ""
        assert "PresenceMatcher" in caplog.text
