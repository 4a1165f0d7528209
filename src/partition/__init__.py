"""Partition — сведение пересекающихся параллелепипедов к разбиению.

- join / distinct: построение попарно непересекающегося разбиения
- transform: трансформация контекстов
- merge_boxes: склейка соседних частей с эквивалентным контекстом
- PartitionReducer: combiner + конфигурация осей в одном объекте
"""

from .coalesce import by_item, by_members, group_by_context, merge_boxes, merge_group
from .reducer import PartitionReducer, distinct, join, transform

__all__ = [
    "PartitionReducer",
    "join",
    "distinct",
    "transform",
    "merge_boxes",
    "merge_group",
    "group_by_context",
    "by_item",
    "by_members",
]
