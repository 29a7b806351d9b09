"""
Color scheme for lrcontrols PyQt6 widgets.

Colors are stored as RGB tuples so schemes stay plain, hashable data that
can be loaded from configuration files. Painting code converts them with
``to_qcolor`` and stylesheet code with ``to_hex``.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple, Union

from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


def parse_rgb(value: Union[str, Tuple[int, ...], list]) -> RGB:
    """
    Convert a hex string or an RGB sequence into an RGB tuple.

    Args:
        value: ``"#rrggbb"`` or a sequence of three integers in 0-255

    Returns:
        RGB tuple

    Raises:
        ValueError: If the value is not a valid color
    """
    if isinstance(value, str):
        color = QColor(value)
        if not color.isValid():
            raise ValueError(f"Invalid color: {value!r}")
        return (color.red(), color.green(), color.blue())

    rgb = tuple(value)
    if len(rgb) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in rgb):
        raise ValueError(f"Invalid RGB color: {value!r}")
    return rgb


@dataclass(frozen=True)
class SliderColorScheme:
    """Colors used to paint the slider and style its child widgets."""

    # Track and thumb
    track_bg: RGB = (169, 169, 169)
    track_border: RGB = (180, 180, 180)
    fill_color: RGB = (30, 144, 255)
    thumb_bg: RGB = (255, 255, 255)
    thumb_border: RGB = (0, 0, 0)

    # Label and stepper
    text_primary: RGB = (0, 0, 0)
    input_bg: RGB = (255, 255, 255)
    input_text: RGB = (0, 0, 0)
    input_border: RGB = (122, 122, 122)
    input_focus_border: RGB = (0, 120, 212)

    # Demo host form
    window_bg: RGB = (240, 240, 240)
    text_accent: RGB = (0, 120, 212)

    @staticmethod
    def to_hex(rgb: RGB) -> str:
        """Convert an RGB tuple to a ``#rrggbb`` string for stylesheets."""
        return "#{:02x}{:02x}{:02x}".format(*rgb)

    @staticmethod
    def to_qcolor(rgb: RGB) -> QColor:
        """Convert an RGB tuple to a QColor for painting."""
        return QColor(*rgb)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SliderColorScheme":
        """
        Build a color scheme from a mapping of color names to colors.

        Missing names keep their defaults.

        Raises:
            ValueError: On unknown color names or invalid colors
        """
        if not isinstance(data, dict):
            raise ValueError("Color overrides must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown color names: {', '.join(sorted(unknown))}")
        logger.debug(f"Building color scheme with overrides: {sorted(data)}")
        return cls(**{name: parse_rgb(value) for name, value in data.items()})
