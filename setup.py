# =============================================================================
# sphero_control / setup.py
# =============================================================================
# Purpose
# -------
# Installs the pure-Python `sphero_control` package:
#   - sphero_control.controllers
#   - sphero_control.interfaces
#   - sphero_control.models
#   - sphero_control.utils
#
# Packaging note
# --------------
# The package has no runtime dependencies outside the standard library.
# Transport (ROS, serial, BLE) lives in the caller; this package only turns a
# positional error into a velocity command.
#
# Consistency requirements
# ------------------------
# Keep these names exactly aligned:
#   setup.py      -> package_name = "sphero_control"
#   version.py    -> PACKAGE_NAME = "sphero_control"
#   folder        -> sphero_control/
# =============================================================================

from setuptools import find_packages, setup

package_name = "sphero_control"

setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(
        include=[
            "sphero_control",
            "sphero_control.*",
        ]
    ),
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
    zip_safe=True,
    maintainer="Sphero Control maintainers",
    description=(
        "Two-axis PID controller for rolling robots: converts an x/y positional "
        "error into an x/y velocity command using proportional, integral, "
        "derivative and second-derivative terms under irregular sampling, "
        "with an explicit max-effort bypass mode."
    ),
    license="Proprietary",
    entry_points={
        "console_scripts": [],
    },
)
