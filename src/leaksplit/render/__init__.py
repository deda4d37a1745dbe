# SPDX-License-Identifier: MIT
"""Output rendering."""

from leaksplit.render.output import OutputFormat, render, write_output

__all__ = ["OutputFormat", "render", "write_output"]
