"""
QStyleSheet Generator for lrcontrols PyQt6 widgets

Generates QStyleSheet strings from SliderColorScheme objects, so the label,
the stepper and the demo form share the colors the track is painted with.
"""

import logging

from lrcontrols.pyqt_gui.shared.color_scheme import SliderColorScheme

logger = logging.getLogger(__name__)


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from SliderColorScheme objects.

    The track and thumb are painted directly and do not use stylesheets;
    these styles cover the standard child widgets around them.
    """

    def __init__(self, color_scheme: SliderColorScheme):
        """
        Initialize the style generator with a color scheme.

        Args:
            color_scheme: SliderColorScheme instance to use for styling
        """
        self.color_scheme = color_scheme

    def update_color_scheme(self, color_scheme: SliderColorScheme):
        """
        Update the color scheme used for style generation.

        Args:
            color_scheme: New SliderColorScheme instance
        """
        self.color_scheme = color_scheme

    def generate_slider_style(self) -> str:
        """
        Generate QStyleSheet for the slider label and stepper.

        Returns:
            str: QStyleSheet for BoundedSlider child widgets
        """
        cs = self.color_scheme
        return f"""
            QLabel {{
                color: {cs.to_hex(cs.text_primary)};
            }}
            QDoubleSpinBox {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 2px;
            }}
            QDoubleSpinBox:focus {{
                border: 1px solid {cs.to_hex(cs.input_focus_border)};
            }}
        """

    def generate_demo_window_style(self) -> str:
        """
        Generate QStyleSheet for the demo host form.

        Returns:
            str: QStyleSheet for SliderDemoWindow
        """
        cs = self.color_scheme
        return f"""
            QMainWindow, QWidget#demo_central {{
                background-color: {cs.to_hex(cs.window_bg)};
            }}
            QLabel#value_readout {{
                color: {cs.to_hex(cs.text_accent)};
                font-weight: bold;
            }}
        """
