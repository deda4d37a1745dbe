# SPDX-License-Identifier: MIT
"""leaksplit package metadata."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("leaksplit")
except PackageNotFoundError:
    __version__ = "0.1.0"
