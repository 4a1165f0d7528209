"""Partition Reducer — сведение набора параллелепипедов к разбиению.

Разбиение (partition) — список попарно непересекающихся параллелепипедов.
Инварианты разбиения поддерживаются операциями редуктора, а не типом:
1. Попарная непересекаемость
2. Покрытие: объединение объёмов равно объединению входных объёмов,
   контекст в каждой точке — левая свёртка combiner по всем входным
   параллелепипедам, покрывающим эту точку, в порядке подачи

Операции:
- join: добавление нового параллелепипеда в разбиение
- distinct: свёртка join по произвольному списку
- transform: трансформация контекстов без изменения геометрии

ВАЖНО: distinct зависит от порядка входа, если combiner не ассоциативен
и не коммутативен.
"""

import logging
from typing import Callable, Hashable, List, Optional, TypeVar

from src.core.domain.box import SpatialBox
from src.core.math.box_algebra import (
    BoxAlgebraConfig,
    Combiner,
    difference_list,
    intersect_list,
)
from src.partition.coalesce import merge_boxes


logger = logging.getLogger(__name__)

C = TypeVar("C")
R = TypeVar("R")


# =============================================================================
# OPERATIONS
# =============================================================================


def join(
    partition: List[SpatialBox[C]],
    box: SpatialBox[C],
    combiner: Combiner,
    config: Optional[BoxAlgebraConfig] = None,
) -> List[SpatialBox[C]]:
    """
    Добавление параллелепипеда в разбиение.

    Результат = differences ++ intersections ++ other_parts, где:
    - differences: части разбиения, не покрытые box
    - intersections: пересечения с box, контекст combiner(part.context, box.context)
    - other_parts: части box, не покрытые ни одним элементом разбиения

    Args:
        partition: Разбиение (попарно непересекающиеся параллелепипеды)
        box: Новый параллелепипед
        combiner: Объединение контекстов
        config: Shifters осей

    Returns:
        Новое разбиение, покрывающее partition ∪ box
    """
    differences = difference_list(partition, box, config)
    intersections = intersect_list(partition, box, combiner)

    other_parts = [box]
    for crossing in intersections:
        other_parts = difference_list(other_parts, crossing, config)

    logger.debug(
        "join: %d differences, %d intersections, %d new parts",
        len(differences),
        len(intersections),
        len(other_parts),
    )
    return differences + intersections + other_parts


def distinct(
    boxes: List[SpatialBox[C]],
    combiner: Combiner,
    config: Optional[BoxAlgebraConfig] = None,
) -> List[SpatialBox[C]]:
    """
    Сведение произвольного списка к разбиению.

    Свёртка join слева направо начиная с пустого разбиения.
    """
    partition: List[SpatialBox[C]] = []
    for box in boxes:
        partition = join(partition, box, combiner, config)

    logger.debug("distinct: %d boxes -> %d disjoint parts", len(boxes), len(partition))
    return partition


def transform(boxes: List[SpatialBox[C]], transformer: Callable[[C], R]) -> List[SpatialBox[R]]:
    """Трансформация контекста каждого параллелепипеда, геометрия не меняется."""
    return [box.with_context(transformer) for box in boxes]


# =============================================================================
# REDUCER
# =============================================================================


class PartitionReducer:
    """Редуктор разбиений с фиксированным combiner и конфигурацией осей.

    Типичный pipeline для правил цен/доступности:
    1. distinct: плоское разбиение без пересечений
    2. coalesce: склейка соседних частей с одинаковым контекстом
    """

    def __init__(self, combiner: Combiner, config: BoxAlgebraConfig | None = None):
        """Инициализация редуктора.

        Args:
            combiner: объединение контекстов пересекающихся параллелепипедов
            config: конфигурация осей (опционально, используется default)
        """
        self.combiner = combiner
        self.config = config or BoxAlgebraConfig()

    def join(self, partition: List[SpatialBox[C]], box: SpatialBox[C]) -> List[SpatialBox[C]]:
        """Добавление параллелепипеда в разбиение."""
        return join(partition, box, self.combiner, self.config)

    def distinct(self, boxes: List[SpatialBox[C]]) -> List[SpatialBox[C]]:
        """Сведение списка к разбиению."""
        return distinct(boxes, self.combiner, self.config)

    def coalesce(
        self, boxes: List[SpatialBox[C]], key: Callable[[C], Hashable]
    ) -> List[SpatialBox[C]]:
        """Склейка параллелепипедов с эквивалентным по key контекстом."""
        return merge_boxes(boxes, key, self.config)

    def distinct_coalesced(
        self, boxes: List[SpatialBox[C]], key: Callable[[C], Hashable]
    ) -> List[SpatialBox[C]]:
        """distinct, затем coalesce результата."""
        return self.coalesce(self.distinct(boxes), key)
