"""
lrcontrols PyQt6 Widgets
"""

from lrcontrols.pyqt_gui.widgets.bounded_slider import BoundedSlider, SliderTrackCanvas

__all__ = [
    "BoundedSlider",
    "SliderTrackCanvas",
]
