"""
lrcontrols: Lightroom-style form controls for PyQt6.

Provides a bounded slider with a paired numeric stepper and a small demo
host form.
"""

import logging

__version__ = "0.1.0"


# Set up basic logging configuration if none exists
# This ensures INFO level logging works when the widget is embedded
# in a host application that never configured logging
def _ensure_basic_logging():
    """Ensure basic logging is configured if no configuration exists."""
    root_logger = logging.getLogger()

    # Only configure if no handlers exist and level is too high
    if not root_logger.handlers and root_logger.level > logging.INFO:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


_ensure_basic_logging()

__all__ = ["__version__"]
