"""
Domain models and value objects.

Contains the fundamental value objects: Interval, SpatialBox and axis shifters.
"""

from src.core.domain.box import NIGHTS_AXIS, OFFER_AXIS, SEASON_AXIS, SpatialBox
from src.core.domain.interval import Interval
from src.core.domain.shifters import Shifter, shift_days, shift_units

__all__ = [
    # Interval model
    "Interval",
    # Spatial box model
    "SpatialBox",
    "OFFER_AXIS",
    "NIGHTS_AXIS",
    "SEASON_AXIS",
    # Shifters
    "Shifter",
    "shift_days",
    "shift_units",
]
