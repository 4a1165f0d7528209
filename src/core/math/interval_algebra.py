"""
Interval Algebra — Операции над замкнутыми интервалами

Операции над одним упорядоченным диапазоном [begin, end]:
- equals: совпадение границ
- intersects: проверка пересечения (границы включительно)
- intersect: пересечение двух интервалов
- difference: остатки интервала после вычитания другого
- merge: склейка пересекающихся или соседних интервалов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отсутствие результата: None (пересечение/склейка), а не исключение
2. difference(a, b) ∪ intersect(a, b) == a, части попарно не пересекаются
3. Остатки difference упорядочены вдоль оси: сначала левый, затем правый
4. Входные интервалы никогда не изменяются
"""

from typing import List, Optional, TypeVar

from src.core.domain.interval import Interval
from src.core.domain.shifters import Shifter


T = TypeVar("T")


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def equals(a: Interval[T], b: Interval[T]) -> bool:
    """Проверка, что границы интервалов совпадают."""
    return a.begin == b.begin and a.end == b.end


def intersects(a: Interval[T], b: Interval[T]) -> bool:
    """
    Проверка пересечения двух замкнутых интервалов.

    Касание в одной точке считается пересечением:
        [1, 5] и [5, 9] → True
        [1, 5] и [6, 9] → False
    """
    return a.end >= b.begin and a.begin <= b.end


# =============================================================================
# ПЕРЕСЕЧЕНИЕ И ОСТАТКИ
# =============================================================================


def intersect(a: Interval[T], b: Interval[T]) -> Optional[Interval[T]]:
    """
    Пересечение двух интервалов.

    Args:
        a: Исходный интервал
        b: Второй интервал

    Returns:
        None если интервалы не пересекаются,
        сам a если интервалы равны,
        иначе [max(a.begin, b.begin), min(a.end, b.end)]
    """
    if not intersects(a, b):
        return None
    if equals(a, b):
        return a

    begin = a.begin if a.begin > b.begin else b.begin
    end = a.end if a.end < b.end else b.end

    return type(a)(begin=begin, end=end)


def difference(a: Interval[T], b: Interval[T], shifter: Shifter) -> List[Interval[T]]:
    """
    Остатки интервала a после вычитания b.

    Остатки + intersect(a, b) = исходный интервал a.

    Args:
        a: Исходный интервал
        b: Вычитаемый интервал
        shifter: Дискретный шаг оси (value, step) → value

    Returns:
        [a] если интервалы не пересекаются, иначе от 0 до 2 остатков
        (левый, затем правый)

    Examples:
        [1, 10] - [4, 6] → [[1, 3], [7, 10]]
        [1, 10] - [1, 6] → [[7, 10]]
        [1, 10] - [0, 20] → []
    """
    if not intersects(a, b):
        return [a]

    result = []
    if a.begin < b.begin:
        # a.end < b.begin невозможно при пересечении, сохраняем a целиком
        result.append(a if a.end < b.begin else type(a)(begin=a.begin, end=shifter(b.begin, -1)))
    if a.end > b.end:
        result.append(a if a.begin > b.end else type(a)(begin=shifter(b.end, +1), end=a.end))
    return result


# =============================================================================
# СКЛЕЙКА
# =============================================================================


def merge(a: Interval[T], b: Interval[T], shifter: Shifter) -> Optional[Interval[T]]:
    """
    Склейка двух интервалов.

    Склеиваются равные, пересекающиеся и соседние интервалы (разрыв ровно в
    один дискретный шаг). При разрыве в два шага и более склейка невозможна.

    Args:
        a: Первый интервал
        b: Второй интервал
        shifter: Дискретный шаг оси

    Returns:
        None если между интервалами есть разрыв,
        сам a если интервалы равны,
        иначе [min(a.begin, b.begin), max(a.end, b.end)]

    Examples:
        [1, 5] + [6, 10] → [1, 10]
        [1, 5] + [7, 10] → None
    """
    extended = type(a)(begin=shifter(a.begin, -1), end=shifter(a.end, +1))
    if not intersects(extended, b):
        return None
    if equals(a, b):
        return a

    begin = a.begin if a.begin <= b.begin else b.begin
    end = a.end if a.end >= b.end else b.end

    return type(a)(begin=begin, end=end)
