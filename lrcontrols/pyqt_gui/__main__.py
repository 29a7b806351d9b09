#!/usr/bin/env python3
"""
lrcontrols PyQt6 demo - Module Entry Point

Allows running the demo directly with:
    python -m lrcontrols.pyqt_gui

This is a convenience wrapper around the launch script.
"""

import sys

from lrcontrols.pyqt_gui.launch import main

if __name__ == "__main__":
    sys.exit(main())
