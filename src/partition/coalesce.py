"""Coalesce — склейка списка параллелепипедов с одинаковым контекстом.

Параллелепипеды группируются по ключу, вычисляемому из контекста, затем
внутри каждой группы выполняется редукция до неподвижной точки:
1. Поиск первой склеиваемой пары (i, j), i < j, в порядке обхода по строкам
2. Замена пары результатом склейки (в конец группы)
3. Повтор, пока в группе есть склеиваемая пара

Стратегии ключа:
- by_item: контекст — один объект, ключ = identifier(context)
- by_members: контекст — список объектов, ключ = множество identifier(item)
  (равенство без учёта порядка)
"""

import logging
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

from src.core.domain.box import SpatialBox
from src.core.math.box_algebra import BoxAlgebraConfig, merge


logger = logging.getLogger(__name__)

C = TypeVar("C")
M = TypeVar("M")

# context → ключ группировки
GroupKey = Callable[[C], Hashable]


# =============================================================================
# GROUPING STRATEGIES
# =============================================================================


def by_item(identifier: Callable[[C], Hashable]) -> GroupKey:
    """Ключ группировки по идентификатору контекста."""
    return identifier


def by_members(identifier: Callable[[M], Hashable]) -> Callable[[Iterable[M]], frozenset]:
    """
    Ключ группировки для контекста-списка.

    Два контекста эквивалентны, если множества идентификаторов их элементов
    совпадают (порядок и повторы не важны).
    """

    def key(context: Iterable[M]) -> frozenset:
        return frozenset(identifier(item) for item in context)

    return key


def group_by_context(boxes: List[SpatialBox[C]], key: GroupKey) -> List[List[SpatialBox[C]]]:
    """Группы в порядке первого появления ключа, элементы в исходном порядке."""
    groups: Dict[Hashable, List[SpatialBox[C]]] = {}
    for box in boxes:
        groups.setdefault(key(box.context), []).append(box)
    return list(groups.values())


# =============================================================================
# MERGE
# =============================================================================


def _find_merge(
    group: List[SpatialBox[C]], config: Optional[BoxAlgebraConfig]
) -> Optional[Tuple[int, int, SpatialBox[C]]]:
    for i in range(len(group)):
        for j in range(i + 1, len(group)):
            merged = merge(group[i], group[j], config)
            if merged is not None:
                return i, j, merged
    return None


def merge_group(
    group: List[SpatialBox[C]], config: Optional[BoxAlgebraConfig] = None
) -> List[SpatialBox[C]]:
    """
    Редукция группы до неподвижной точки.

    Все элементы группы должны иметь эквивалентный контекст: склейка берёт
    контекст первого элемента пары.
    """
    result = list(group)
    while True:
        found = _find_merge(result, config)
        if found is None:
            return result

        i, j, merged = found
        logger.debug("merging boxes %d and %d of %d", i, j, len(result))
        # j > i: удаляем сначала j, чтобы индекс i остался валидным
        del result[j]
        del result[i]
        result.append(merged)


def merge_boxes(
    boxes: List[SpatialBox[C]], key: GroupKey, config: Optional[BoxAlgebraConfig] = None
) -> List[SpatialBox[C]]:
    """
    Склейка параллелепипедов с эквивалентным контекстом.

    Args:
        boxes: Список параллелепипедов (обычно результат distinct)
        key: Ключ эквивалентности контекстов (by_item / by_members / любой hashable)
        config: Shifters осей

    Returns:
        Склеенные группы, конкатенированные в порядке первого появления ключа
    """
    result = []
    for group in group_by_context(boxes, key):
        result.extend(merge_group(group, config))

    logger.debug("coalesced %d boxes into %d", len(boxes), len(result))
    return result
