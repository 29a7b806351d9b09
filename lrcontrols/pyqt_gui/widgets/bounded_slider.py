"""
Bounded Slider Widget for PyQt6

A labeled, draggable slider with a paired numeric stepper. The value is a
float kept inside [minimum, maximum]; the track is painted by a canvas
sub-widget that sits between the label and the stepper.
"""

import logging
from typing import Iterable, Optional

from PyQt6.QtCore import QRect, QRectF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QWidget

from lrcontrols.pyqt_gui.config import LabelAlignment, SliderConfig, SliderGeometryConfig
from lrcontrols.pyqt_gui.shared.color_scheme import SliderColorScheme
from lrcontrols.pyqt_gui.shared.gradient import (
    GradientStops, build_linear_gradient, normalize_gradient_stops
)
from lrcontrols.pyqt_gui.shared.slider_geometry import (
    TrackGeometry, clamp, compute_track_geometry, fill_width, thumb_rect, value_from_position
)
from lrcontrols.pyqt_gui.shared.style_generator import StyleSheetGenerator
from lrcontrols.pyqt_gui.widgets.shared.stepper_spinbox import StepperSpinBox

logger = logging.getLogger(__name__)


class SliderTrackCanvas(QWidget):
    """
    Drawable region of a BoundedSlider.

    Paints the track, fill and thumb, and forwards mouse input to the owning
    slider's drag state machine. Coordinates are canvas-local: the canvas
    starts at the label's right edge and ends at the stepper's left edge.
    """

    def __init__(self, slider: "BoundedSlider", parent=None):
        super().__init__(parent)
        self.slider = slider
        self.setMouseTracking(True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)

    def track_geometry(self) -> TrackGeometry:
        geometry_config = self.slider.geometry_config
        return compute_track_geometry(
            0, self.width(), self.height(),
            geometry_config.track_gap, geometry_config.track_thickness
        )

    def current_fill_width(self) -> int:
        """Filled track width in pixels for the slider's current value."""
        return fill_width(
            self.slider.value, self.slider.minimum, self.slider.maximum,
            self.track_geometry().width
        )

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        try:
            self.render_track(painter)
        finally:
            painter.end()

    def render_track(self, painter: QPainter):
        """Draw track, fill (when no gradient is set) and thumb, in that order."""
        geometry = self.track_geometry()
        if geometry.is_degenerate:
            return

        cs = self.slider.color_scheme
        geometry_config = self.slider.geometry_config
        stops = self.slider.gradient_stops
        track = QRect(geometry.left, geometry.top, geometry.width, geometry.thickness)

        # Track
        if stops:
            painter.fillRect(track, QBrush(build_linear_gradient(stops, QRectF(track))))
        else:
            painter.fillRect(track, cs.to_qcolor(cs.track_bg))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.setPen(QPen(cs.to_qcolor(cs.track_border)))
        painter.drawRect(track)

        # Fill; the gradient stands in for it
        fill = self.current_fill_width()
        if not stops:
            painter.fillRect(
                QRect(geometry.left, geometry.top, fill, geometry.thickness),
                cs.to_qcolor(cs.fill_color)
            )

        # Thumb
        thumb = QRect(*thumb_rect(
            geometry, fill, geometry_config.thumb_width, geometry_config.thumb_height
        ))
        painter.fillRect(thumb, cs.to_qcolor(cs.thumb_bg))
        painter.setPen(QPen(cs.to_qcolor(cs.thumb_border)))
        painter.drawRect(thumb)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.slider.begin_drag(event.position().x())
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        x = event.position().x()
        self.slider.drag_to(x)
        self.update_cursor(x)

    def mouseReleaseEvent(self, event: QMouseEvent):
        self.slider.end_drag()

    def update_cursor(self, x: float):
        """Pointing hand over the track, default cursor elsewhere."""
        if self.track_geometry().contains_x(x):
            self.setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self.unsetCursor()


class BoundedSlider(QWidget):
    """
    PyQt6 Bounded Slider Widget.

    Composes a label, a track canvas and a numeric stepper. Every accepted
    value mutation (setter, stepper edit or drag) emits ``value_changed``,
    even when the clamped value equals the previous one.
    """

    # Signals
    value_changed = pyqtSignal(float)  # new value

    def __init__(self, config: Optional[SliderConfig] = None,
                 geometry_config: Optional[SliderGeometryConfig] = None,
                 color_scheme: Optional[SliderColorScheme] = None,
                 parent=None):
        """
        Initialize the bounded slider.

        Args:
            config: Initial label, range, value and stepper settings
            geometry_config: Track and thumb measurements
            color_scheme: Colors for painting and child widget styles
            parent: Parent widget
        """
        super().__init__(parent)

        self.config = config or SliderConfig()
        self.geometry_config = geometry_config or SliderGeometryConfig()
        self.color_scheme = color_scheme or SliderColorScheme()
        self.style_generator = StyleSheetGenerator(self.color_scheme)

        # Value state
        self._minimum = float(self.config.minimum)
        self._maximum = float(self.config.maximum)
        self._value = clamp(float(self.config.value), self._minimum, self._maximum)
        self._gradient_stops: Optional[GradientStops] = None
        self._label_alignment = self.config.label_alignment

        # Transient interaction state
        self.is_dragging = False

        # UI components
        self.label: Optional[QLabel] = None
        self.canvas: Optional[SliderTrackCanvas] = None
        self.stepper: Optional[StepperSpinBox] = None

        self.setup_ui()
        self.setup_connections()

        logger.debug(
            f"Bounded slider '{self.config.label_text}' initialized: "
            f"range [{self._minimum}, {self._maximum}], value {self._value}"
        )

    def setup_ui(self):
        """Setup the user interface."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        # Zero spacing: the canvas spans exactly from label to stepper
        layout.setSpacing(0)

        self.label = QLabel(self.config.label_text)
        self.label.setFixedWidth(self.config.label_width)
        self.label.setAlignment(self._label_alignment.to_qt())
        layout.addWidget(self.label)

        self.canvas = SliderTrackCanvas(self)
        layout.addWidget(self.canvas, 1)

        self.stepper = StepperSpinBox()
        self.stepper.setFixedWidth(self.config.stepper_width)
        self.stepper.setDecimals(self.config.decimal_places)
        self.stepper.setSingleStep(self.config.increment)
        self.stepper.set_display_range(self._minimum, self._maximum)
        self.stepper.set_display_value(self._value)
        layout.addWidget(self.stepper)

        self.setStyleSheet(self.style_generator.generate_slider_style())

    def setup_connections(self):
        """Setup signal/slot connections."""
        self.stepper.valueChanged.connect(self._on_stepper_value_changed)

    def sizeHint(self) -> QSize:
        return QSize(self.config.width, self.config.height)

    # ------------------------------------------------------------------
    # Value contract
    # ------------------------------------------------------------------

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float):
        self._value = clamp(float(value), self._minimum, self._maximum)
        self.stepper.set_display_value(self._value)
        self.canvas.update()
        self.value_changed.emit(self._value)

    @property
    def minimum(self) -> float:
        return self._minimum

    @minimum.setter
    def minimum(self, minimum: float):
        self._minimum = float(minimum)
        if self._maximum < self._minimum:
            self._maximum = self._minimum
        self._on_range_changed()
        if self._value < self._minimum:
            self.value = self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    @maximum.setter
    def maximum(self, maximum: float):
        self._maximum = float(maximum)
        if self._minimum > self._maximum:
            self._minimum = self._maximum
        self._on_range_changed()
        if self._value > self._maximum:
            self.value = self._maximum

    def _on_range_changed(self):
        logger.debug(f"Slider '{self.label_text}' range changed to [{self._minimum}, {self._maximum}]")
        self.stepper.set_display_range(self._minimum, self._maximum)
        self.canvas.update()

    def _on_stepper_value_changed(self, value: float):
        self.value = value

    # ------------------------------------------------------------------
    # Label and stepper properties
    # ------------------------------------------------------------------

    @property
    def label_text(self) -> str:
        return self.label.text()

    @label_text.setter
    def label_text(self, text: str):
        self.label.setText(text)

    @property
    def label_alignment(self) -> LabelAlignment:
        return self._label_alignment

    @label_alignment.setter
    def label_alignment(self, alignment: LabelAlignment):
        self._label_alignment = LabelAlignment(alignment)
        self.label.setAlignment(self._label_alignment.to_qt())

    @property
    def label_width(self) -> int:
        return self.label.maximumWidth()

    @label_width.setter
    def label_width(self, width: int):
        self.label.setFixedWidth(max(0, int(width)))
        self.canvas.update()

    @property
    def increment(self) -> float:
        return self.stepper.singleStep()

    @increment.setter
    def increment(self, increment: float):
        if increment < 0:
            raise ValueError("increment must not be negative")
        self.stepper.setSingleStep(increment)

    @property
    def decimal_places(self) -> int:
        return self.stepper.decimals()

    @decimal_places.setter
    def decimal_places(self, decimals: int):
        self.stepper.set_display_decimals(max(0, int(decimals)))
        self.stepper.set_display_range(self._minimum, self._maximum)
        self.stepper.set_display_value(self._value)

    @property
    def gradient_stops(self) -> Optional[GradientStops]:
        return self._gradient_stops

    @gradient_stops.setter
    def gradient_stops(self, stops: Optional[Iterable]):
        self._gradient_stops = normalize_gradient_stops(stops)
        self.canvas.update()

    # ------------------------------------------------------------------
    # Drag state machine (x in canvas coordinates)
    # ------------------------------------------------------------------

    def begin_drag(self, x: float):
        """Idle -> Dragging; the down position sets the value immediately."""
        self.is_dragging = True
        self.update_value_from_position(x)

    def drag_to(self, x: float):
        """Follow the pointer while dragging, inside the track or not."""
        if self.is_dragging:
            self.update_value_from_position(x)

    def end_drag(self):
        """Dragging -> Idle."""
        self.is_dragging = False

    def update_value_from_position(self, x: float):
        """Set value from a canvas x coordinate; the value setter clamps."""
        self.value = value_from_position(
            x, self.canvas.track_geometry(), self._minimum, self._maximum
        )
