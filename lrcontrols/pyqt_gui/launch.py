#!/usr/bin/env python3
"""
lrcontrols PyQt6 Demo Launcher

Launch script for the slider demo application.
Provides command-line interface and application initialization.
"""

import sys
import time
import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import PYQT_VERSION_STR

from lrcontrols import __version__
from lrcontrols.pyqt_gui.app import LRControlsPyQtApp
from lrcontrols.pyqt_gui.config import (
    VALID_LOG_LEVELS, PyQtGUIConfig, get_default_pyqt_gui_config, load_pyqt_gui_config
)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def default_log_dir() -> Path:
    return Path.home() / ".local" / "share" / "lrcontrols" / "logs"


def setup_logging(log_level: str = "INFO", log_file: Optional[Path] = None,
                  enable_file_logging: bool = True) -> Optional[Path]:
    """
    Setup console and file logging for the whole lrcontrols package.

    Args:
        log_level: Name of the minimum log level
        log_file: Log file path; a timestamped file in the default log
            directory is used when None
        enable_file_logging: Log to a file in addition to the console

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    log_level_obj = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()

    # Clear any existing handlers to ensure clean state
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if enable_file_logging:
        if log_file is None:
            log_dir = default_log_dir()
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / f"lrcontrols_{time.strftime('%Y%m%d_%H%M%S')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)
    else:
        log_file = None

    root_logger.setLevel(log_level_obj)
    logging.getLogger("lrcontrols").setLevel(log_level_obj)

    logger = logging.getLogger("lrcontrols.pyqt_gui")
    logger.info(f"lrcontrols logging started - Level: {logging.getLevelName(log_level_obj)}")
    if log_file is not None:
        logger.info(f"Log file: {log_file}")

    return log_file


def parse_arguments(argv: Optional[list] = None):
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="lrcontrols - Bounded slider demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Launch with default settings
  %(prog)s --log-level DEBUG        # Launch with debug logging
  %(prog)s --config demo.yaml       # Launch with custom config
  %(prog)s --log-file demo.log      # Launch with log file
        """
    )

    parser.add_argument(
        '--log-level',
        choices=list(VALID_LOG_LEVELS),
        default=None,
        help='Set logging level (default: from config, INFO)'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        help='Log file path (default: timestamped file in ~/.local/share/lrcontrols/logs)'
    )

    parser.add_argument(
        '--config',
        type=Path,
        help='YAML configuration file path'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'lrcontrols {__version__}'
    )

    return parser.parse_args(argv)


def load_configuration(config_path: Optional[Path] = None) -> PyQtGUIConfig:
    """
    Load the GUI configuration.

    Args:
        config_path: Optional YAML configuration file path

    Returns:
        GUI configuration object; defaults when no file is given or the
        file cannot be loaded
    """
    if config_path is None:
        return get_default_pyqt_gui_config()

    try:
        logging.info(f"Loading configuration from: {config_path}")
        return load_pyqt_gui_config(config_path)
    except (OSError, ValueError) as e:
        logging.error(f"Failed to load configuration: {e}")
        logging.info("Falling back to default configuration")
        return get_default_pyqt_gui_config()


def main(argv: Optional[list] = None):
    """
    Main entry point for the lrcontrols demo launcher.

    Returns:
        Exit code
    """
    args = parse_arguments(argv)

    config = load_configuration(args.config)
    if args.log_level is not None:
        config = replace(config, logging=replace(config.logging, log_level=args.log_level))
    elif config.enable_debug_mode:
        config = replace(config, logging=replace(config.logging, log_level="DEBUG"))

    setup_logging(config.logging.log_level, args.log_file, config.logging.enable_file_logging)

    logging.info("Starting lrcontrols demo...")
    logging.info(f"Python version: {sys.version}")
    logging.info(f"Platform: {sys.platform}")

    try:
        logging.debug(f"PyQt6 version: {PYQT_VERSION_STR}")

        logging.info("Initializing PyQt6 application...")
        app = LRControlsPyQtApp(sys.argv[:1], config)

        logging.info("Starting application event loop...")
        exit_code = app.run()

        logging.info(f"Application exited with code: {exit_code}")
        return exit_code

    except KeyboardInterrupt:
        logging.info("Application interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    except Exception as e:
        logging.critical(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
