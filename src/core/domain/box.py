"""
SpatialBox — Многомерный параллелепипед с произвольным контекстом

Immutable Pydantic модель: декартово произведение трёх интервалов (осей)
плюс непрозрачный контекст.

Оси (в порядке обхода алгеброй):
- offer  — окно бронирования (даты)
- nights — длительность проживания (количество ночей)
- season — сезон проживания (даты)

Контекст алгеброй не интерпретируется: он только передаётся в
пользовательские функции (combiner, transformer, identifier).
"""

from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, SkipValidation

from src.core.domain.interval import Interval


C = TypeVar("C")
R = TypeVar("R")


# =============================================================================
# AXES
# =============================================================================

OFFER_AXIS = "offer"
NIGHTS_AXIS = "nights"
SEASON_AXIS = "season"


# =============================================================================
# SPATIAL BOX MODEL
# =============================================================================


class SpatialBox(BaseModel, Generic[C]):
    """
    Параллелепипед offer × nights × season с контекстом.

    Immutable модель (frozen=True). Все изменения создают новый экземпляр
    через with_axes / with_context.
    """

    # Порядок осей значим: difference "снимает" остатки именно в этом порядке
    AXES: ClassVar[tuple[str, ...]] = (OFFER_AXIS, NIGHTS_AXIS, SEASON_AXIS)

    offer: Interval = Field(..., description="Окно бронирования")
    nights: Interval = Field(..., description="Диапазон количества ночей")
    season: Interval = Field(..., description="Сезон проживания")

    # Контекст хранится как есть: без валидации и копирования
    context: SkipValidation[C] = Field(None, description="Непрозрачный контекст (payload)")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def axis(self, name: str) -> Interval:
        """Интервал оси по имени."""
        if name not in self.AXES:
            raise ValueError(f"Unknown axis {name!r}, expected one of {self.AXES} (unknown_axis)")
        return getattr(self, name)

    def axes(self) -> tuple[Interval, ...]:
        """Интервалы всех осей в порядке AXES."""
        return tuple(getattr(self, name) for name in self.AXES)

    def geometry(self) -> tuple[tuple[Any, Any], ...]:
        """
        Геометрия без контекста в виде hashable кортежа.

        Returns:
            ((offer.begin, offer.end), (nights.begin, nights.end), ...)
        """
        return tuple((interval.begin, interval.end) for interval in self.axes())

    def with_axes(
        self,
        offer: Optional[Interval] = None,
        nights: Optional[Interval] = None,
        season: Optional[Interval] = None,
    ) -> "SpatialBox[C]":
        """
        Копия с заменёнными осями (None — ось остаётся прежней).

        Контекст переносится без изменений.
        """
        update = {
            name: interval
            for name, interval in ((OFFER_AXIS, offer), (NIGHTS_AXIS, nights), (SEASON_AXIS, season))
            if interval is not None
        }
        return self.model_copy(update=update)

    def with_context(self, transformer: Callable[[C], R]) -> "SpatialBox[R]":
        """
        Копия с трансформированным контекстом.

        Геометрия не меняется, тип контекста может быть другим.
        """
        return SpatialBox(
            offer=self.offer,
            nights=self.nights,
            season=self.season,
            context=transformer(self.context),
        )
