"""
Core math modules

Алгебра интервалов и параллелепипедов: пересечение, остатки, склейка.
"""

# Interval Algebra
from src.core.math import interval_algebra

# Box Algebra
from src.core.math.box_algebra import (
    DEFAULT_CONFIG,
    BoxAlgebraConfig,
    Combiner,
    difference,
    difference_box_list,
    difference_list,
    difference_lists,
    intersect,
    intersect_box_list,
    intersect_list,
    intersect_lists,
    intersects,
    merge,
)

__all__ = [
    # Interval Algebra: module
    "interval_algebra",
    # Box Algebra: Config
    "BoxAlgebraConfig",
    "DEFAULT_CONFIG",
    # Box Algebra: Types
    "Combiner",
    # Box Algebra: Intersection
    "intersects",
    "intersect",
    "intersect_list",
    "intersect_box_list",
    "intersect_lists",
    # Box Algebra: Difference
    "difference",
    "difference_list",
    "difference_box_list",
    "difference_lists",
    # Box Algebra: Merge
    "merge",
]
