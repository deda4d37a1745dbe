# SPDX-License-Identifier: MIT
"""Gitleaks report loading."""

from leaksplit.report.loader import load_report, read_report

__all__ = ["load_report", "read_report"]
