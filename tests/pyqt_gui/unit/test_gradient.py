"""
Unit tests for gradient stop handling and color schemes.
"""

import pytest
from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QColor

from lrcontrols.pyqt_gui.shared.color_scheme import SliderColorScheme, parse_rgb
from lrcontrols.pyqt_gui.shared.gradient import (
    GradientStop, build_linear_gradient, normalize_gradient_stops, to_qcolor,
)
from lrcontrols.pyqt_gui.shared.style_generator import StyleSheetGenerator


class TestGradientStops:
    """Test validation and ordering of gradient stops."""

    def test_stops_sorted_by_position(self, demo_gradient_stops):
        stops = normalize_gradient_stops(demo_gradient_stops)
        assert [s.position for s in stops] == [0.0, 0.5, 1.0]
        assert stops[0].color == QColor("red")
        assert stops[1].color == QColor("yellow")
        assert stops[2].color == QColor("lime")

    def test_none_and_empty_mean_no_gradient(self):
        assert normalize_gradient_stops(None) is None
        assert normalize_gradient_stops([]) is None

    def test_accepts_stop_objects_and_color_forms(self):
        stops = normalize_gradient_stops([
            GradientStop(0.25, QColor(1, 2, 3)),
            (0.75, (10, 20, 30)),
            (0.5, "#ff8000"),
        ])
        assert [s.position for s in stops] == [0.25, 0.5, 0.75]
        assert stops[1].color == QColor(255, 128, 0)
        assert stops[2].color == QColor(10, 20, 30)

    def test_integer_positions_become_floats(self):
        stops = normalize_gradient_stops([(0, "red"), (1, "blue")])
        assert all(isinstance(s.position, float) for s in stops)

    @pytest.mark.parametrize("position", [-0.01, 1.01, 5])
    def test_position_outside_unit_interval_rejected(self, position):
        with pytest.raises(ValueError, match="outside"):
            normalize_gradient_stops([(position, "red")])

    @pytest.mark.parametrize("color", ["not-a-color", (1, 2), object()])
    def test_invalid_color_rejected(self, color):
        with pytest.raises(ValueError, match="Invalid color"):
            to_qcolor(color)

    def test_linear_gradient_spans_rect_horizontally(self, demo_gradient_stops):
        stops = normalize_gradient_stops(demo_gradient_stops)
        gradient = build_linear_gradient(stops, QRectF(8, 8, 200, 6))

        assert gradient.start().x() == 8
        assert gradient.finalStop().x() == 208
        assert gradient.start().y() == gradient.finalStop().y()
        assert [position for position, _ in gradient.stops()] == [0.0, 0.5, 1.0]


class TestColorScheme:
    """Test the slider color scheme and generated stylesheets."""

    def test_to_hex(self):
        assert SliderColorScheme.to_hex((30, 144, 255)) == "#1e90ff"

    def test_to_qcolor(self):
        assert SliderColorScheme.to_qcolor((1, 2, 3)) == QColor(1, 2, 3)

    def test_parse_rgb_forms(self):
        assert parse_rgb("#1e90ff") == (30, 144, 255)
        assert parse_rgb("dodgerblue") == (30, 144, 255)
        assert parse_rgb([1, 2, 3]) == (1, 2, 3)

    @pytest.mark.parametrize("value", ["nope", [1, 2], [0, 0, 256], [0.5, 0, 0]])
    def test_parse_rgb_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            parse_rgb(value)

    def test_from_dict_overrides_only_given_colors(self):
        scheme = SliderColorScheme.from_dict({"fill_color": "#ff0000"})
        assert scheme.fill_color == (255, 0, 0)
        assert scheme.track_bg == SliderColorScheme().track_bg

    def test_from_dict_rejects_unknown_names(self):
        with pytest.raises(ValueError, match="Unknown color names"):
            SliderColorScheme.from_dict({"fill_colour": "#ff0000"})

    def test_slider_style_uses_scheme_colors(self):
        scheme = SliderColorScheme(input_bg=(1, 2, 3), input_focus_border=(4, 5, 6))
        style = StyleSheetGenerator(scheme).generate_slider_style()
        assert "QDoubleSpinBox" in style
        assert "#010203" in style
        assert "#040506" in style

    def test_update_color_scheme(self):
        generator = StyleSheetGenerator(SliderColorScheme())
        generator.update_color_scheme(SliderColorScheme(window_bg=(9, 9, 9)))
        assert "#090909" in generator.generate_demo_window_style()
