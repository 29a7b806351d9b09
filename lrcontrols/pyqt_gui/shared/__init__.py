"""
lrcontrols PyQt6 Shared Components

Color scheme, stylesheet generation, gradient stops and the value/pixel
math shared by the slider widget.
"""

from lrcontrols.pyqt_gui.shared.color_scheme import SliderColorScheme
from lrcontrols.pyqt_gui.shared.style_generator import StyleSheetGenerator
from lrcontrols.pyqt_gui.shared.gradient import GradientStop, normalize_gradient_stops

__all__ = [
    "SliderColorScheme",
    "StyleSheetGenerator",
    "GradientStop",
    "normalize_gradient_stops",
]
