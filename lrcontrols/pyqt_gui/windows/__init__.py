"""
lrcontrols PyQt6 Windows
"""

from lrcontrols.pyqt_gui.windows.slider_demo_window import SliderDemoWindow

__all__ = ["SliderDemoWindow"]
