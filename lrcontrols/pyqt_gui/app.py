"""
lrcontrols PyQt6 Application

Application class that initializes the PyQt6 application, holds the GUI
configuration and manages the demo window lifecycle.
"""

import sys
import logging
from typing import Optional

from PyQt6.QtWidgets import QApplication, QMessageBox

from lrcontrols import __version__
from lrcontrols.pyqt_gui.config import PyQtGUIConfig, get_default_pyqt_gui_config
from lrcontrols.pyqt_gui.windows.slider_demo_window import SliderDemoWindow

logger = logging.getLogger(__name__)


class LRControlsPyQtApp(QApplication):
    """
    lrcontrols PyQt6 Application.

    Manages the GUI configuration and the demo window lifecycle.
    """

    def __init__(self, argv: list, gui_config: Optional[PyQtGUIConfig] = None):
        """
        Initialize the lrcontrols PyQt6 application.

        Args:
            argv: Command line arguments
            gui_config: GUI configuration (uses default if None)
        """
        super().__init__(argv)

        # Application metadata
        self.setApplicationName("lrcontrols")
        self.setApplicationVersion(__version__)

        self.gui_config = gui_config or get_default_pyqt_gui_config()

        # Main window
        self.main_window: Optional[SliderDemoWindow] = None

        self.setup_application()

        logger.info("lrcontrols PyQt6 application initialized")

    def setup_application(self):
        """Setup application-wide configuration."""
        sys.excepthook = self.handle_exception

    def create_main_window(self) -> SliderDemoWindow:
        """
        Create the demo window if it does not exist yet.

        Returns:
            Created demo window
        """
        if self.main_window is None:
            self.main_window = SliderDemoWindow(self.gui_config)
        return self.main_window

    def show_main_window(self):
        """Show the demo window."""
        if self.main_window is None:
            self.create_main_window()

        self.main_window.show()
        self.main_window.raise_()
        self.main_window.activateWindow()

    def handle_exception(self, exc_type, exc_value, exc_traceback):
        """
        Handle uncaught exceptions.

        Args:
            exc_type: Exception type
            exc_value: Exception value
            exc_traceback: Exception traceback
        """
        if issubclass(exc_type, KeyboardInterrupt):
            # Handle Ctrl+C gracefully
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

        if self.main_window:
            QMessageBox.critical(
                self.main_window,
                "Unexpected Error",
                f"An unexpected error occurred:\n\n{exc_type.__name__}: {exc_value}"
            )
        else:
            raise RuntimeError("Uncaught exception occurred but no main window available for error dialog")

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Application exit code
        """
        self.show_main_window()
        return self.exec()


if __name__ == "__main__":
    # Don't run directly - use launch.py instead
    print("Use 'python -m lrcontrols.pyqt_gui' or 'python -m lrcontrols.pyqt_gui.launch' to start the demo")
    sys.exit(1)
