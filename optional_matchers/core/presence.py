"""
Presence — единственный источник истины для проверки наличия значения

Optional-значение в Python представлено как typing.Optional[T]:
- None          → состояние Empty
- любой объект  → состояние Present(v)

И PresenceMatcher, и HasValue проверяют наличие только через эту функцию.
"""

from typing import Any, Optional


def is_value_present(item: Optional[Any]) -> bool:
    """
    Проверка, находится ли optional в состоянии Present.

    Args:
        item: Проверяемое optional-значение

    Returns:
        True если значение присутствует (item is not None)
    """
    return item is not None
