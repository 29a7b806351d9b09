"""
PyQt GUI configuration dataclasses for lrcontrols.

This module defines configuration objects for the slider widget and the demo
host form. Configuration is intended to be immutable and provided as Python
objects, optionally overridden from a YAML file.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml
from PyQt6.QtCore import Qt

from lrcontrols.pyqt_gui.shared.color_scheme import SliderColorScheme

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class LabelAlignment(Enum):
    """Horizontal alignment of the slider label text."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    def to_qt(self) -> Qt.AlignmentFlag:
        """Qt alignment flags for this alignment, always vertically centered."""
        horizontal = {
            LabelAlignment.LEFT: Qt.AlignmentFlag.AlignLeft,
            LabelAlignment.CENTER: Qt.AlignmentFlag.AlignHCenter,
            LabelAlignment.RIGHT: Qt.AlignmentFlag.AlignRight,
        }[self]
        return horizontal | Qt.AlignmentFlag.AlignVCenter


@dataclass(frozen=True)
class SliderConfig:
    """Initial state of a BoundedSlider."""

    label_text: str = "Exposure"
    """Text shown in the label left of the track."""

    label_alignment: LabelAlignment = LabelAlignment.LEFT
    """Alignment of the label text inside the label."""

    label_width: int = 80
    """Fixed width of the label in pixels."""

    stepper_width: int = 60
    """Fixed width of the numeric stepper in pixels."""

    minimum: float = -100.0
    maximum: float = 100.0
    value: float = 0.0

    increment: float = 0.1
    """Step applied by the stepper arrows; 0 disables stepping."""

    decimal_places: int = 2
    """Decimals shown by the stepper."""

    width: int = 300
    """Preferred widget width in pixels."""

    height: int = 23
    """Preferred widget height in pixels."""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.label_alignment, str):
            object.__setattr__(self, "label_alignment", LabelAlignment(self.label_alignment))
        if self.minimum > self.maximum:
            raise ValueError("minimum must not exceed maximum")
        if not self.minimum <= self.value <= self.maximum:
            raise ValueError("value must lie within [minimum, maximum]")
        if self.increment < 0:
            raise ValueError("increment must not be negative")
        if self.decimal_places < 0:
            raise ValueError("decimal_places must not be negative")
        if self.label_width < 0 or self.stepper_width < 0:
            raise ValueError("label_width and stepper_width must not be negative")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")


@dataclass(frozen=True)
class SliderGeometryConfig:
    """Fixed pixel measurements of the track and thumb."""

    track_gap: int = 8
    """Gap between the track and the label / stepper on either side."""

    track_thickness: int = 6
    thumb_width: int = 10
    thumb_height: int = 16

    def __post_init__(self):
        if self.track_gap < 0:
            raise ValueError("track_gap must not be negative")
        if self.track_thickness <= 0 or self.thumb_width <= 0 or self.thumb_height <= 0:
            raise ValueError("track and thumb sizes must be positive")


@dataclass(frozen=True)
class DemoWindowConfig:
    """Configuration for the demo host form."""

    title: str = "lrcontrols - Slider Demo"
    default_width: int = 420
    default_height: int = 110

    use_gradient: bool = True
    """Paint the demo slider with gradient_stops instead of a flat fill."""

    gradient_stops: Tuple[Tuple[float, str], ...] = (
        (0.0, "red"),
        (0.5, "yellow"),
        (1.0, "lime"),
    )
    """Gradient stops as (position, color) pairs."""

    value_decimals: int = 2
    """Decimals used by the value readout label."""

    def __post_init__(self):
        stops = tuple((float(position), color) for position, color in self.gradient_stops)
        object.__setattr__(self, "gradient_stops", stops)
        if any(not 0.0 <= position <= 1.0 for position, _ in stops):
            raise ValueError("gradient stop positions must lie within [0, 1]")
        if self.value_decimals < 0:
            raise ValueError("value_decimals must not be negative")


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for GUI logging."""

    log_level: str = "INFO"
    """Minimum log level."""

    enable_file_logging: bool = True
    """Enable logging to a timestamped file next to console logging."""

    def __post_init__(self):
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")


@dataclass(frozen=True)
class PyQtGUIConfig:
    """
    Root configuration object for the lrcontrols PyQt GUI.

    Provides a centralized, immutable configuration for the slider widget
    and the demo application.
    """

    slider: SliderConfig = field(default_factory=SliderConfig)
    geometry: SliderGeometryConfig = field(default_factory=SliderGeometryConfig)
    colors: SliderColorScheme = field(default_factory=SliderColorScheme)
    demo: DemoWindowConfig = field(default_factory=DemoWindowConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    enable_debug_mode: bool = False
    """Enable debug mode with additional logging."""


def get_default_pyqt_gui_config() -> PyQtGUIConfig:
    """
    Provides a default instance of PyQtGUIConfig.

    Returns:
        PyQtGUIConfig: Default configuration instance
    """
    logger.debug("Initializing with default PyQtGUIConfig.")
    return PyQtGUIConfig()


def _replace_section(section: Any, overrides: Dict[str, Any], name: str) -> Any:
    """Return a copy of a config dataclass with YAML overrides applied."""
    if not isinstance(overrides, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    known = {f.name for f in fields(section)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown keys in config section '{name}': {', '.join(sorted(unknown))}")
    return replace(section, **overrides)


def load_pyqt_gui_config(config_path: Union[str, Path]) -> PyQtGUIConfig:
    """
    Load a PyQtGUIConfig from a YAML file.

    The file may contain the top-level sections ``slider``, ``geometry``,
    ``colors``, ``demo`` and ``logging`` plus the ``enable_debug_mode`` flag.
    Anything not given keeps its default.

    Args:
        config_path: Path to the YAML file

    Returns:
        PyQtGUIConfig: Loaded configuration

    Raises:
        ValueError: If the file contains unknown sections, unknown keys or
            invalid values
    """
    config_path = Path(config_path)
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    known_sections = {f.name for f in fields(PyQtGUIConfig)}
    unknown = set(data) - known_sections
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(sorted(unknown))}")

    default = get_default_pyqt_gui_config()
    config = PyQtGUIConfig(
        slider=_replace_section(default.slider, data.get("slider") or {}, "slider"),
        geometry=_replace_section(default.geometry, data.get("geometry") or {}, "geometry"),
        colors=SliderColorScheme.from_dict(data.get("colors") or {}),
        demo=_replace_section(default.demo, data.get("demo") or {}, "demo"),
        logging=_replace_section(default.logging, data.get("logging") or {}, "logging"),
        enable_debug_mode=bool(data.get("enable_debug_mode", False)),
    )
    logger.info(f"Loaded configuration from {config_path}")
    return config
