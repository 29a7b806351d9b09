"""
Value/pixel mapping for the bounded slider.

Pure functions with no Qt dependency: the slider widget and its tests share
them so the painted thumb and the drag gesture always agree on where a value
lives on the track.
"""

from dataclasses import dataclass
from typing import Tuple


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value into [minimum, maximum]."""
    return max(minimum, min(maximum, value))


@dataclass(frozen=True)
class TrackGeometry:
    """
    Horizontal track span inside the drawable region.

    ``left`` and ``right`` are pixel x coordinates; ``width`` may be zero or
    negative when the region is too narrow for the track and its gaps.
    """
    left: int
    right: int
    center_y: int
    thickness: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def top(self) -> int:
        return self.center_y - self.thickness // 2

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0

    def contains_x(self, x: float) -> bool:
        """True if x lies over the track (inclusive of both ends)."""
        return self.left <= x <= self.right


def compute_track_geometry(region_left: int, region_right: int, height: int,
                           gap: int, thickness: int) -> TrackGeometry:
    """
    Lay the track out between two horizontal edges.

    Args:
        region_left: Right edge of whatever sits left of the track (the label)
        region_right: Left edge of whatever sits right of the track (the stepper)
        height: Height of the drawable region; the track is centered vertically
        gap: Fixed gap kept free on both sides of the track
        thickness: Track thickness in pixels
    """
    return TrackGeometry(
        left=region_left + gap,
        right=region_right - gap,
        center_y=height // 2,
        thickness=thickness,
    )


def value_fraction(value: float, minimum: float, maximum: float) -> float:
    """Position of value within the range as a fraction; 0 for an empty range."""
    span = maximum - minimum
    if span <= 0:
        return 0.0
    return (clamp(value, minimum, maximum) - minimum) / span


def fill_width(value: float, minimum: float, maximum: float, track_width: int) -> int:
    """Width in whole pixels of the filled part of the track."""
    if track_width <= 0:
        return 0
    return int(value_fraction(value, minimum, maximum) * track_width)


def value_from_position(x: float, geometry: TrackGeometry,
                        minimum: float, maximum: float) -> float:
    """
    Map a pointer x coordinate to an unclamped slider value.

    Positions outside the track map outside the range; callers clamp through
    the value setter. A degenerate track maps every position to minimum.
    """
    if geometry.is_degenerate:
        return minimum
    percent = (x - geometry.left) / geometry.width
    return minimum + percent * (maximum - minimum)


def thumb_rect(geometry: TrackGeometry, fill: int,
               thumb_width: int, thumb_height: int) -> Tuple[int, int, int, int]:
    """
    Thumb rectangle as (x, y, width, height), centered on the fill boundary.

    The thumb may overhang the track by half its width at either end.
    """
    thumb_x = geometry.left + fill
    return (
        thumb_x - thumb_width // 2,
        geometry.center_y - thumb_height // 2,
        thumb_width,
        thumb_height,
    )
