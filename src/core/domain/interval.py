"""
Interval — Замкнутый интервал над упорядоченным типом

Immutable Pydantic модель, представляющая диапазон [begin, end] (обе границы
включительно) над произвольным вполне упорядоченным типом: date, datetime,
int и т.д.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. begin <= end (проверяется при создании, инвертированный интервал отклоняется)
2. Интервал никогда не изменяется — все операции создают новый экземпляр
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator


T = TypeVar("T")


# =============================================================================
# INTERVAL MODEL
# =============================================================================


class Interval(BaseModel, Generic[T]):
    """
    Замкнутый интервал [begin, end].

    Immutable модель (frozen=True). Тип границ должен поддерживать
    полное сравнение (<, <=, ==).

    Примеры:
        Interval(begin=date(2024, 1, 1), end=date(2024, 1, 10))
        Interval[int](begin=2, end=5)
    """

    begin: T = Field(..., description="Начало интервала (включительно)")
    end: T = Field(..., description="Конец интервала (включительно)")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("end")
    @classmethod
    def validate_not_inverted(cls, v: T, info) -> T:
        """Проверка, что end >= begin (interval_inverted, interval_incomparable)"""
        if "begin" in info.data:
            begin = info.data["begin"]
            try:
                inverted = v < begin
            except TypeError as e:
                raise ValueError(
                    f"Interval bounds {begin!r} and {v!r} are not comparable (interval_incomparable)"
                ) from e
            if inverted:
                raise ValueError(
                    f"Interval end {v!r} is before begin {begin!r} (interval_inverted)"
                )
        return v

    def contains(self, value: T) -> bool:
        """
        Проверка принадлежности точки интервалу.

        Returns:
            True если begin <= value <= end
        """
        return self.begin <= value <= self.end
