"""
MatcherWording — текстовые токены описаний matcher'ов

Immutable Pydantic модель с литералами, из которых собираются описания
ожидания и расхождения. Значения по умолчанию воспроизводят формат сообщений
дословно: на этот текст могут опираться внешние тесты.

Сборка сообщений (при DEFAULT_WORDING):
- expected present:              "<Present>"
- expected empty:                "<Empty>"
- expected value:                "<Present> and " + inner
- mismatch, ожидалось present:   "was <Empty>"
- mismatch, ожидалось empty:     "was <Present> with value " + str(value)
- mismatch, значение не совпало: "was <Present> and " + inner mismatch
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class MatcherWording(BaseModel):
    """
    Набор литералов для описаний optional-matcher'ов.

    Все поля frozen: один экземпляр безопасно разделяется между matcher'ами
    и потоками.
    """

    present: str = Field(default="<Present>", min_length=1, description="Токен состояния Present")
    empty: str = Field(default="<Empty>", min_length=1, description="Токен состояния Empty")
    was: str = Field(default="was ", description="Префикс описания фактического значения")
    conjunction: str = Field(default=" and ", description="Связка между частями составного описания")
    with_value: str = Field(default=" with value ", description="Связка перед текстом значения")

    model_config = {"frozen": True}

    @field_validator("empty")
    @classmethod
    def validate_empty_differs(cls, v: str, info) -> str:
        """Токены Present и Empty должны различаться, иначе сообщения неоднозначны"""
        if "present" in info.data and info.data["present"] == v:
            raise ValueError("empty token must differ from present token")
        return v

    def was_empty(self) -> str:
        """Описание расхождения для пустого optional: 'was <Empty>'"""
        return f"{self.was}{self.empty}"

    def was_present(self) -> str:
        """Начало описания расхождения для непустого optional: 'was <Present>'"""
        return f"{self.was}{self.present}"

    def was_present_with_value(self, value: Any) -> str:
        """Описание расхождения с текстом значения: 'was <Present> with value v'"""
        return f"{self.was_present()}{self.with_value}{value}"


# Экземпляр по умолчанию, используется всеми фабриками без явного wording
DEFAULT_WORDING = MatcherWording()
