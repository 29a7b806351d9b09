"""
lrcontrols PyQt6 GUI

PyQt6 implementation of the bounded slider control and its demo host form.
"""

from lrcontrols.pyqt_gui.widgets.bounded_slider import BoundedSlider
from lrcontrols.pyqt_gui.windows.slider_demo_window import SliderDemoWindow

__all__ = [
    "BoundedSlider",
    "SliderDemoWindow",
]
