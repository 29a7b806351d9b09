"""Global pytest configuration for lrcontrols tests."""
import os
import pytest

# pytest-qt picks its binding from this before any QApplication exists
os.environ.setdefault("PYTEST_QT_API", "pyqt6")


def pytest_addoption(parser):
    """Add command-line options for GUI test configuration."""

    # Helper function to get default from environment variable
    def env_default(env_var, default_value):
        return os.getenv(env_var, default_value)

    parser.addoption(
        "--qt-platform",
        action="store",
        default=env_default("QT_QPA_PLATFORM", "offscreen"),
        help="Qt platform plugin for GUI tests (default: offscreen). Use 'xcb' or 'wayland' to watch tests run."
    )


def pytest_configure(config):
    """Select the Qt platform before pytest-qt creates the QApplication."""
    valid_platforms = ["offscreen", "minimal", "xcb", "wayland", "windows", "cocoa"]

    platform = config.getoption("--qt-platform")
    if platform not in valid_platforms:
        raise pytest.UsageError(
            f"Invalid value '{platform}' for --qt-platform. "
            f"Valid choices: {', '.join(valid_platforms)}"
        )

    os.environ["QT_QPA_PLATFORM"] = platform
