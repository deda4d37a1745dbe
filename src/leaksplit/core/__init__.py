# SPDX-License-Identifier: MIT
"""Finding model, partitioning and error types."""
