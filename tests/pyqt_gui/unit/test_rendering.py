"""
Unit tests for BoundedSlider track rendering.

Frames are captured with QWidget.grab() and inspected pixel by pixel along
the track's vertical center line.
"""

import pytest
from PyQt6.QtGui import QColor

from lrcontrols.pyqt_gui.config import SliderConfig
from lrcontrols.pyqt_gui.shared.color_scheme import SliderColorScheme
from lrcontrols.pyqt_gui.widgets.bounded_slider import BoundedSlider


def track_pixel(slider, x):
    """Color of the canvas pixel at x on the track center line."""
    geometry = slider.canvas.track_geometry()
    return slider.canvas.grab().toImage().pixelColor(x, geometry.center_y)


@pytest.fixture
def colors():
    return SliderColorScheme()


class TestFlatRendering:
    """Test the flat track with a solid progress fill."""

    def test_fill_drawn_left_of_thumb(self, slider, colors):
        slider.value = slider.maximum
        geometry = slider.canvas.track_geometry()

        assert track_pixel(slider, geometry.left + 20) == QColor(*colors.fill_color)

    def test_track_background_right_of_thumb(self, slider, colors):
        slider.value = slider.minimum
        geometry = slider.canvas.track_geometry()

        assert track_pixel(slider, geometry.right - 20) == QColor(*colors.track_bg)

    def test_thumb_drawn_on_fill_boundary(self, slider, colors):
        slider.value = 0.0
        geometry = slider.canvas.track_geometry()
        boundary = geometry.left + slider.canvas.current_fill_width()

        assert track_pixel(slider, boundary) == QColor(*colors.thumb_bg)

    def test_custom_fill_color(self, qtbot):
        scheme = SliderColorScheme(fill_color=(200, 10, 10))
        slider = BoundedSlider(SliderConfig(value=100), color_scheme=scheme)
        qtbot.addWidget(slider)
        slider.resize(300, 30)
        slider.show()
        qtbot.waitExposed(slider)
        geometry = slider.canvas.track_geometry()

        assert track_pixel(slider, geometry.left + 20) == QColor(200, 10, 10)


class TestGradientRendering:
    """Test the gradient track, which replaces the progress fill."""

    def test_gradient_replaces_fill(self, slider, demo_gradient_stops, colors):
        slider.gradient_stops = demo_gradient_stops
        slider.value = slider.maximum
        geometry = slider.canvas.track_geometry()

        assert track_pixel(slider, geometry.left + 20) != QColor(*colors.fill_color)

    def test_gradient_interpolates_across_stops(self, slider, demo_gradient_stops):
        slider.gradient_stops = demo_gradient_stops
        slider.value = slider.minimum
        geometry = slider.canvas.track_geometry()

        near_left = track_pixel(slider, geometry.left + 7)
        middle = track_pixel(slider, geometry.left + geometry.width // 2)
        near_right = track_pixel(slider, geometry.right - 2)

        # red -> yellow -> lime
        assert near_left.red() > 200 and near_left.green() < 80
        assert middle.red() > 200 and middle.green() > 200
        assert near_right.red() < 80 and near_right.green() > 200

    def test_clearing_gradient_restores_flat_track(self, slider, demo_gradient_stops, colors):
        slider.gradient_stops = demo_gradient_stops
        slider.gradient_stops = None
        slider.value = slider.minimum
        geometry = slider.canvas.track_geometry()

        assert track_pixel(slider, geometry.right - 20) == QColor(*colors.track_bg)


class TestRenderingEdgeCases:
    """Test idempotent and degenerate rendering."""

    def test_rendering_is_idempotent(self, slider, demo_gradient_stops):
        slider.gradient_stops = demo_gradient_stops
        slider.value = 37.5

        first = slider.canvas.grab().toImage()
        second = slider.canvas.grab().toImage()

        assert first == second

    def test_rendering_depends_only_on_state(self, slider):
        slider.value = 37.5
        first = slider.canvas.grab().toImage()

        slider.value = -20.0
        slider.value = 37.5
        second = slider.canvas.grab().toImage()

        assert first == second

    def test_degenerate_layout_renders_without_error(self, make_slider, qtbot):
        slider = make_slider(width=150)
        qtbot.waitUntil(lambda: slider.canvas.track_geometry().is_degenerate)

        image = slider.canvas.grab().toImage()

        assert image.width() == slider.canvas.width()
