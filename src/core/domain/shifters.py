"""
Shifters — Дискретные шаги по осям

Shifter — чистая функция (value, step) → value, возвращающая соседнее
значение оси на расстоянии step дискретных шагов. Используется алгеброй для
вычисления "элемента сразу до/после границы" (difference, merge).

ВАЖНО: корректность difference/merge зависит от того, что shifter является
истинным дискретным шагом для типа оси.
"""

from datetime import date, timedelta
from typing import Callable, TypeVar


T = TypeVar("T")

# (value, step) → value, сдвинутое на step дискретных шагов
Shifter = Callable[[T, int], T]

D = TypeVar("D", bound=date)


# =============================================================================
# СТАНДАРТНЫЕ SHIFTERS
# =============================================================================


def shift_days(value: D, step: int) -> D:
    """
    Сдвиг даты на step дней.

    Работает и для date, и для datetime (datetime — подкласс date).

    Examples:
        >>> shift_days(date(2024, 1, 31), 1)
        datetime.date(2024, 2, 1)
        >>> shift_days(date(2024, 3, 1), -1)
        datetime.date(2024, 2, 29)
    """
    return value + timedelta(days=step)


def shift_units(value: int, step: int) -> int:
    """Сдвиг целого значения (например, количества ночей) на step единиц."""
    return value + step
