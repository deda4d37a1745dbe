#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Allow running leaksplit as a module: python -m leaksplit
"""

from leaksplit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
