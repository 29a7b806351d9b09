from setuptools import setup, find_packages
import os

# Read version from __init__.py
def get_version():
    """Get version from lrcontrols/__init__.py"""
    init_file = os.path.join(os.path.dirname(__file__), "lrcontrols", "__init__.py")
    with open(init_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"\'')
    raise RuntimeError("Unable to find version string.")

# Installation Examples:
# - Widget and demo: pip install lrcontrols
# - With test tooling: pip install "lrcontrols[dev]"

extras_require = {
    # Development dependencies
    "dev": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "coverage>=7.3.2",
        "pytest-qt>=4.2.0",  # PyQt6 testing framework
    ],
}

setup(
    name="lrcontrols",
    version=get_version(),
    description="Lightroom-style bounded slider control with numeric stepper for PyQt6",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: User Interfaces",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    keywords="pyqt6, widget, slider, spinbox, gui",
    packages=find_packages(include=["lrcontrols", "lrcontrols.*"]),
    install_requires=[
        "PyQt6>=6.9.1",
        "PyYAML>=6.0.2",
    ],
    extras_require=extras_require,

    # Console script entry points
    entry_points={
        "console_scripts": [
            "lrcontrols-demo=lrcontrols.pyqt_gui.launch:main",
        ],
    },
)
