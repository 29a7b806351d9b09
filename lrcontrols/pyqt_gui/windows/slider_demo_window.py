"""
Slider Demo Window for PyQt6

Minimal host form: one gradient-painted BoundedSlider and a readout label
that follows its value.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from lrcontrols.pyqt_gui.config import PyQtGUIConfig, get_default_pyqt_gui_config
from lrcontrols.pyqt_gui.shared.style_generator import StyleSheetGenerator
from lrcontrols.pyqt_gui.widgets.bounded_slider import BoundedSlider

logger = logging.getLogger(__name__)


class SliderDemoWindow(QMainWindow):
    """Demo host form for the bounded slider."""

    def __init__(self, gui_config: Optional[PyQtGUIConfig] = None, parent=None):
        """
        Initialize the demo window.

        Args:
            gui_config: GUI configuration (uses default if None)
            parent: Parent widget
        """
        super().__init__(parent)
        self.gui_config = gui_config or get_default_pyqt_gui_config()

        self.slider: Optional[BoundedSlider] = None
        self.value_label: Optional[QLabel] = None

        self.setup_ui()
        self.setup_connections()
        self.on_value_changed(self.slider.value)

        logger.debug("Slider demo window initialized")

    def setup_ui(self):
        """Setup the user interface."""
        demo = self.gui_config.demo
        self.setWindowTitle(demo.title)
        self.resize(demo.default_width, demo.default_height)

        central = QWidget()
        central.setObjectName("demo_central")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.slider = BoundedSlider(
            config=self.gui_config.slider,
            geometry_config=self.gui_config.geometry,
            color_scheme=self.gui_config.colors,
        )
        if demo.use_gradient:
            self.slider.gradient_stops = demo.gradient_stops
        layout.addWidget(self.slider)

        self.value_label = QLabel()
        self.value_label.setObjectName("value_readout")
        layout.addWidget(self.value_label)
        layout.addStretch()

        self.setCentralWidget(central)
        self.setStyleSheet(
            StyleSheetGenerator(self.gui_config.colors).generate_demo_window_style()
        )

    def setup_connections(self):
        """Setup signal/slot connections."""
        self.slider.value_changed.connect(self.on_value_changed)

    def on_value_changed(self, value: float):
        """Show the slider value in the readout label."""
        self.value_label.setText(f"{value:.{self.gui_config.demo.value_decimals}f}")
