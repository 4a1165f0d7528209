"""
Тесты для модели Interval и shifters

Проверяет:
1. Создание и валидацию (interval_inverted)
2. Immutability (frozen=True)
3. Принадлежность точки интервалу
4. Дискретные шаги shift_days / shift_units
5. Пользовательские упорядоченные типы и несравнимые границы (interval_incomparable)
"""

from datetime import date, datetime
from functools import total_ordering

import pytest
from pydantic import ValidationError

from src.core.domain import Interval, shift_days, shift_units
from src.core.math.interval_algebra import difference, merge


# =============================================================================
# INTERVAL MODEL TESTS
# =============================================================================


class TestInterval:
    """Тесты для модели Interval"""

    def test_creation_dates(self) -> None:
        """Создание интервала дат"""
        interval = Interval(begin=date(2024, 1, 1), end=date(2024, 1, 10))
        assert interval.begin == date(2024, 1, 1)
        assert interval.end == date(2024, 1, 10)

    def test_creation_parametrized(self) -> None:
        """Создание параметризованного интервала"""
        interval = Interval[int](begin=2, end=5)
        assert interval.begin == 2
        assert interval.end == 5

    def test_single_point_interval(self) -> None:
        """Вырожденный интервал begin == end допустим"""
        interval = Interval(begin=3, end=3)
        assert interval.begin == interval.end == 3

    def test_inverted_interval_rejected(self) -> None:
        """Инвертированный интервал отклоняется при создании"""
        with pytest.raises(ValidationError, match="interval_inverted"):
            Interval(begin=5, end=2)

    def test_inverted_date_interval_rejected(self) -> None:
        """Инвертированный интервал дат отклоняется при создании"""
        with pytest.raises(ValidationError, match="interval_inverted"):
            Interval(begin=date(2024, 2, 1), end=date(2024, 1, 31))

    def test_immutable(self) -> None:
        """Интервал должен быть immutable (frozen=True)"""
        interval = Interval(begin=1, end=5)
        with pytest.raises(ValidationError):
            interval.end = 10  # type: ignore

    def test_equality_and_hash(self) -> None:
        """Равные интервалы равны и имеют одинаковый hash"""
        a = Interval(begin=1, end=5)
        b = Interval(begin=1, end=5)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Interval(begin=1, end=6)

    @pytest.mark.parametrize(
        "value,expected",
        [(0, False), (1, True), (3, True), (5, True), (6, False)],
    )
    def test_contains(self, value: int, expected: bool) -> None:
        """Границы принадлежат интервалу (замкнутый интервал)"""
        assert Interval(begin=1, end=5).contains(value) is expected


# =============================================================================
# SHIFTER TESTS
# =============================================================================


class TestShifters:
    """Тесты для стандартных shifters"""

    def test_shift_days_forward_across_month(self) -> None:
        """Сдвиг вперёд через границу месяца"""
        assert shift_days(date(2024, 1, 31), 1) == date(2024, 2, 1)

    def test_shift_days_backward_leap_year(self) -> None:
        """Сдвиг назад в високосный февраль"""
        assert shift_days(date(2024, 3, 1), -1) == date(2024, 2, 29)

    def test_shift_days_datetime_keeps_time(self) -> None:
        """datetime сдвигается на сутки с сохранением времени"""
        assert shift_days(datetime(2024, 1, 1, 12, 30), 2) == datetime(2024, 1, 3, 12, 30)

    def test_shift_units(self) -> None:
        """Сдвиг целых значений"""
        assert shift_units(5, 1) == 6
        assert shift_units(5, -1) == 4
        assert shift_units(5, 0) == 5


# =============================================================================
# CUSTOM ORDERED TYPES
# =============================================================================


@total_ordering
class Step:
    """Пользовательский вполне упорядоченный тип оси"""

    def __init__(self, index: int) -> None:
        self.index = index

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Step) and self.index == other.index

    def __lt__(self, other: "Step") -> bool:
        return self.index < other.index

    def __hash__(self) -> int:
        return hash(self.index)


def shift_step(value: Step, step: int) -> Step:
    return Step(value.index + step)


class TestIntervalCustomTypes:
    """Тесты для интервалов над пользовательскими типами"""

    def test_parametrized_custom_type(self) -> None:
        """Interval[Step] создаётся и хранит границы как есть"""
        begin, end = Step(1), Step(4)
        interval = Interval[Step](begin=begin, end=end)
        assert interval.begin is begin
        assert interval.end is end

    def test_custom_type_inverted_rejected(self) -> None:
        """Инвертированный Interval[Step] отклоняется"""
        with pytest.raises(ValidationError, match="interval_inverted"):
            Interval[Step](begin=Step(4), end=Step(1))

    def test_custom_type_algebra(self) -> None:
        """Алгебра работает с пользовательским типом и его shifter"""
        a = Interval[Step](begin=Step(1), end=Step(10))
        b = Interval[Step](begin=Step(4), end=Step(6))
        assert difference(a, b, shift_step) == [
            Interval[Step](begin=Step(1), end=Step(3)),
            Interval[Step](begin=Step(7), end=Step(10)),
        ]
        assert merge(b, Interval[Step](begin=Step(7), end=Step(9)), shift_step) == Interval[Step](
            begin=Step(4), end=Step(9)
        )

    def test_incomparable_bounds_rejected(self) -> None:
        """Несравнимые границы → ValidationError, а не TypeError"""
        with pytest.raises(ValidationError, match="interval_incomparable"):
            Interval(begin=date(2024, 1, 1), end=5)
