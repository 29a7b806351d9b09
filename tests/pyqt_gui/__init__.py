"""
PyQt6 GUI tests for lrcontrols.

This package contains tests for the PyQt6 GUI components, including:
- Value/pixel geometry and gradient stops
- BoundedSlider value contract and signals
- Pointer interaction and rendering
- Configuration loading and the demo launcher
"""
