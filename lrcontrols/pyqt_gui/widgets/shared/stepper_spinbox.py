"""
Numeric stepper paired with the bounded slider.

Only steps on the mouse wheel while focused, commits typed text on Enter or
focus-out, and offers display-only setters that never re-emit valueChanged.
"""

import math

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QWheelEvent
from PyQt6.QtWidgets import QDoubleSpinBox


class StepperSpinBox(QDoubleSpinBox):
    """DoubleSpinBox used as the slider's numeric input."""

    def __init__(self, parent=None):
        super().__init__(parent)
        # Per-keystroke valueChanged would rewrite the text while typing
        self.setKeyboardTracking(False)
        # Wheel focus would let a passing scroll grab the box
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    def wheelEvent(self, event: QWheelEvent):
        """Step on the wheel only when focused; otherwise let the parent scroll."""
        if self.hasFocus():
            super().wheelEvent(event)
        else:
            event.ignore()

    def set_display_value(self, value: float):
        """Show value without emitting valueChanged."""
        self.blockSignals(True)
        try:
            self.setValue(value)
        finally:
            self.blockSignals(False)

    def set_display_range(self, minimum: float, maximum: float):
        """
        Change the accepted range without emitting valueChanged.

        Bounds are widened outward to the shown precision so that rounding
        never excludes a value the slider holds.
        """
        factor = 10 ** self.decimals()
        lower = math.floor(round(minimum * factor, 6)) / factor
        upper = math.ceil(round(maximum * factor, 6)) / factor
        self.blockSignals(True)
        try:
            self.setRange(lower, upper)
        finally:
            self.blockSignals(False)

    def set_display_decimals(self, decimals: int):
        """Change shown decimals; setDecimals re-rounds and may emit otherwise."""
        self.blockSignals(True)
        try:
            self.setDecimals(decimals)
        finally:
            self.blockSignals(False)
