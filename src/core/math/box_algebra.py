"""
Box Algebra — Пересечение, остатки и склейка параллелепипедов

Обобщение interval_algebra на все оси SpatialBox одновременно:
- intersect: пересечение по всем осям, контекст = combiner(box, other)
- difference: разбиение box \\ other на попарно непересекающиеся части
- merge: склейка двух параллелепипедов, различающихся ровно по одной оси

Списочные формы:
- intersect_list / difference_list: поэлементно, пустые результаты отброшены
- intersect_box_list / difference_box_list: параллелепипед × список
- intersect_lists / difference_lists: последовательная свёртка (fold) по
  второму списку слева направо, НЕ симметричное декартово произведение

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустое пересечение хотя бы по одной оси → пересечение параллелепипедов пусто
2. combiner вызывается строго в порядке (box.context, other.context)
3. difference снимает остатки в порядке осей offer → nights → season,
   фиксируя уже обработанные оси на пересечении; части попарно не пересекаются
   и вместе с пересечением в точности восстанавливают box
4. merge не комбинирует контекст, он берётся из box
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TypeVar

from src.core.domain.box import NIGHTS_AXIS, OFFER_AXIS, SEASON_AXIS, SpatialBox
from src.core.domain.interval import Interval
from src.core.domain.shifters import Shifter, shift_days, shift_units
from src.core.math import interval_algebra


C = TypeVar("C")

# (box.context, other.context) → context пересечения
Combiner = Callable[[C, C], C]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BoxAlgebraConfig:
    """Конфигурация алгебры параллелепипедов.

    Дискретный шаг для каждой оси SpatialBox.
    """

    # Окно бронирования: шаг в сутки
    offer_shifter: Shifter = shift_days

    # Количество ночей: шаг в единицу
    nights_shifter: Shifter = shift_units

    # Сезон: шаг в сутки
    season_shifter: Shifter = shift_days

    def shifter_for(self, axis: str) -> Shifter:
        """Shifter оси по её имени."""
        if axis == OFFER_AXIS:
            return self.offer_shifter
        if axis == NIGHTS_AXIS:
            return self.nights_shifter
        if axis == SEASON_AXIS:
            return self.season_shifter
        raise ValueError(f"No shifter configured for axis {axis!r} (unknown_axis)")


DEFAULT_CONFIG = BoxAlgebraConfig()


# =============================================================================
# INTERSECTION
# =============================================================================


def _intersect_axes(box: SpatialBox, other: SpatialBox) -> Optional[Dict[str, Interval]]:
    """Пересечения по всем осям или None, если хотя бы одно пусто."""
    result = {}
    for axis in box.AXES:
        crossing = interval_algebra.intersect(box.axis(axis), other.axis(axis))
        if crossing is None:
            return None
        result[axis] = crossing
    return result


def intersects(box: SpatialBox, other: SpatialBox) -> bool:
    """Проверка пересечения параллелепипедов по всем осям."""
    return all(
        interval_algebra.intersects(box.axis(axis), other.axis(axis)) for axis in box.AXES
    )


def intersect(
    box: SpatialBox[C], other: SpatialBox[C], combiner: Combiner
) -> Optional[SpatialBox[C]]:
    """
    Пересечение двух параллелепипедов.

    Args:
        box: Исходный параллелепипед
        other: Второй параллелепипед
        combiner: Объединение контекстов, вызывается как combiner(box.context, other.context)

    Returns:
        None если пересечение пусто, иначе новый параллелепипед
        с комбинированным контекстом
    """
    crossing = _intersect_axes(box, other)
    if crossing is None:
        return None

    return type(box)(**crossing, context=combiner(box.context, other.context))


def intersect_list(
    boxes: List[SpatialBox[C]], other: SpatialBox[C], combiner: Combiner
) -> List[SpatialBox[C]]:
    """Пересечение каждого элемента списка с other (пустые отброшены)."""
    result = []
    for box in boxes:
        crossing = intersect(box, other, combiner)
        if crossing is not None:
            result.append(crossing)
    return result


def intersect_box_list(
    box: SpatialBox[C], others: List[SpatialBox[C]], combiner: Combiner
) -> List[SpatialBox[C]]:
    """
    Пересечение параллелепипеда со списком.

    Эквивалентно intersect_list(others, box): combiner вызывается как
    combiner(others[i].context, box.context).
    """
    return intersect_list(others, box, combiner)


def intersect_lists(
    boxes: List[SpatialBox[C]], others: List[SpatialBox[C]], combiner: Combiner
) -> List[SpatialBox[C]]:
    """
    Последовательное сужение boxes каждым элементом others слева направо.

    Это свёртка, а не декартово произведение: результат шага i
    пересекается с others[i + 1].
    """
    result = list(boxes)
    for other in others:
        result = intersect_list(result, other, combiner)
    return result


# =============================================================================
# DIFFERENCE
# =============================================================================


def difference(
    box: SpatialBox[C], other: SpatialBox[C], config: Optional[BoxAlgebraConfig] = None
) -> List[SpatialBox[C]]:
    """
    Остатки параллелепипеда box после вычитания other.

    Остатки снимаются по осям в порядке AXES. Для оси k остатки
    интервала box[k] \\ I[k] дополняются осями 0..k-1, зафиксированными на
    пересечении I, и осями k+1.. из box. Это исключает повторное покрытие
    объёма, уже выданного на предыдущих осях.

    Args:
        box: Исходный параллелепипед
        other: Вычитаемый параллелепипед
        config: Shifters осей (по умолчанию DEFAULT_CONFIG)

    Returns:
        [box] если параллелепипеды не пересекаются, иначе до 2 остатков
        на каждую ось. Контекст остатков берётся из box.
    """
    config = config or DEFAULT_CONFIG

    crossing = _intersect_axes(box, other)
    if crossing is None:
        return [box]

    result = []
    pinned: Dict[str, Interval] = {}
    for axis in box.AXES:
        remainders = interval_algebra.difference(
            box.axis(axis), crossing[axis], config.shifter_for(axis)
        )
        for remainder in remainders:
            result.append(box.with_axes(**pinned, **{axis: remainder}))
        pinned[axis] = crossing[axis]
    return result


def difference_list(
    boxes: List[SpatialBox[C]], other: SpatialBox[C], config: Optional[BoxAlgebraConfig] = None
) -> List[SpatialBox[C]]:
    """Остатки каждого элемента списка после вычитания other."""
    result = []
    for box in boxes:
        result.extend(difference(box, other, config))
    return result


def difference_box_list(
    box: SpatialBox[C], others: List[SpatialBox[C]], config: Optional[BoxAlgebraConfig] = None
) -> List[SpatialBox[C]]:
    """Последовательное вычитание каждого элемента others из [box]."""
    return difference_lists([box], others, config)


def difference_lists(
    boxes: List[SpatialBox[C]],
    others: List[SpatialBox[C]],
    config: Optional[BoxAlgebraConfig] = None,
) -> List[SpatialBox[C]]:
    """
    Последовательное вычитание others из boxes слева направо.

    Свёртка: остатки шага i уменьшаются на others[i + 1].
    """
    result = list(boxes)
    for other in others:
        result = difference_list(result, other, config)
    return result


# =============================================================================
# MERGE
# =============================================================================


def merge(
    box: SpatialBox[C], other: SpatialBox[C], config: Optional[BoxAlgebraConfig] = None
) -> Optional[SpatialBox[C]]:
    """
    Склейка двух параллелепипедов.

    Склейка возможна, только если интервалы склеиваются ровно по одной оси,
    а по двум остальным совпадают. Склейка сразу по нескольким осям не
    выполняется. Оси проверяются в порядке AXES.

    ВАЖНО: контекст не комбинируется, берётся из box. Вызывающий код обязан
    заранее сгруппировать параллелепипеды по одинаковому контексту.

    Returns:
        Копия box с заменённой осью или None
    """
    config = config or DEFAULT_CONFIG

    equal = {
        axis: interval_algebra.equals(box.axis(axis), other.axis(axis)) for axis in box.AXES
    }
    merged = {
        axis: interval_algebra.merge(box.axis(axis), other.axis(axis), config.shifter_for(axis))
        for axis in box.AXES
    }

    for axis in box.AXES:
        if merged[axis] is None:
            continue
        if all(equal[rest] for rest in box.AXES if rest != axis):
            return box.with_axes(**{axis: merged[axis]})
    return None
