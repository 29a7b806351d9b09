"""
Gradient stops for the slider track.

A gradient replaces the flat track color and the progress fill. Stops are
validated and sorted once, when assigned, so painting only has to hand them
to a QLinearGradient.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QColor, QLinearGradient

logger = logging.getLogger(__name__)

ColorLike = Union[QColor, str, Tuple[int, int, int]]


def to_qcolor(color: ColorLike) -> QColor:
    """
    Convert a color name, hex string, RGB tuple or QColor to a valid QColor.

    Raises:
        ValueError: If the color is not valid
    """
    if isinstance(color, QColor):
        qcolor = QColor(color)
    elif isinstance(color, str):
        qcolor = QColor(color)
    else:
        try:
            qcolor = QColor(*color)
        except TypeError as e:
            raise ValueError(f"Invalid color: {color!r}") from e
    if not qcolor.isValid():
        raise ValueError(f"Invalid color: {color!r}")
    return qcolor


@dataclass(frozen=True)
class GradientStop:
    """A color at a relative position along the track."""
    position: float
    color: QColor

    def __post_init__(self):
        position = float(self.position)
        if not 0.0 <= position <= 1.0:
            raise ValueError(f"Gradient stop position {position} outside [0, 1]")
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "color", to_qcolor(self.color))


GradientStops = Tuple[GradientStop, ...]


def normalize_gradient_stops(
    stops: Optional[Iterable[Union[GradientStop, Tuple[float, ColorLike]]]]
) -> Optional[GradientStops]:
    """
    Validate and sort gradient stops by position.

    Args:
        stops: GradientStop objects or (position, color) pairs, or None

    Returns:
        Sorted tuple of stops, or None when no stops were given

    Raises:
        ValueError: On positions outside [0, 1] or invalid colors
    """
    if stops is None:
        return None

    normalized = []
    for stop in stops:
        if not isinstance(stop, GradientStop):
            position, color = stop
            stop = GradientStop(position, color)
        normalized.append(stop)

    if not normalized:
        return None

    logger.debug(f"Normalized {len(normalized)} gradient stops")
    # sorted() is stable: stops sharing a position keep their given order
    return tuple(sorted(normalized, key=lambda s: s.position))


def build_linear_gradient(stops: GradientStops, rect: QRectF) -> QLinearGradient:
    """Horizontal gradient spanning rect, interpolated across the stops."""
    gradient = QLinearGradient(rect.left(), rect.center().y(), rect.right(), rect.center().y())
    for stop in stops:
        gradient.setColorAt(stop.position, stop.color)
    return gradient
