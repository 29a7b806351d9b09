"""
Shared widgets for the lrcontrols PyQt6 GUI.
"""

from lrcontrols.pyqt_gui.widgets.shared.stepper_spinbox import StepperSpinBox

__all__ = ["StepperSpinBox"]
