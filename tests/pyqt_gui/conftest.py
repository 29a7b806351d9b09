"""
PyQt6 GUI test configuration and fixtures.

This module provides common fixtures and configuration for PyQt6 GUI tests.
"""

import pytest

from lrcontrols.pyqt_gui.config import SliderConfig
from lrcontrols.pyqt_gui.widgets.bounded_slider import BoundedSlider


@pytest.fixture
def make_slider(qtbot):
    """Factory for shown BoundedSlider widgets with a laid-out, usable track."""
    def _make(width: int = 300, height: int = 30, **config_overrides) -> BoundedSlider:
        slider = BoundedSlider(SliderConfig(**config_overrides))
        qtbot.addWidget(slider)
        slider.resize(width, height)
        slider.show()
        qtbot.waitExposed(slider)
        return slider
    return _make


@pytest.fixture
def slider(make_slider, qtbot):
    """Default BoundedSlider: range [-100, 100], value 0."""
    slider = make_slider()
    qtbot.waitUntil(lambda: not slider.canvas.track_geometry().is_degenerate)
    return slider


@pytest.fixture
def demo_gradient_stops():
    """Red -> yellow -> lime stops, deliberately unsorted."""
    return [(1.0, "lime"), (0.0, "red"), (0.5, "yellow")]


@pytest.fixture
def value_spy(slider):
    """Record every value_changed emission of the default slider."""
    emissions = []
    slider.value_changed.connect(emissions.append)
    return emissions
