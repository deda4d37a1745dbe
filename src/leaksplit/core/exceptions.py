# SPDX-License-Identifier: MIT
"""leaksplit exceptions."""

from __future__ import annotations


class LeakSplitError(Exception):
    """Base class for every error that aborts a run."""


class ConfigError(LeakSplitError):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, config_path: str = None, key: str = None):
        self.config_path = config_path
        self.key = key
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.config_path:
            msg += f" (config: {self.config_path})"
        if self.key:
            msg += f" (key: {self.key})"
        return msg


class ReadError(LeakSplitError):
    """Raised when the report cannot be opened or read."""

    def __init__(self, message: str, path: str = None):
        self.path = path
        super().__init__(message)


class DecodeError(LeakSplitError):
    """Raised when the report is not a well-formed array of findings."""


class WriteError(LeakSplitError):
    """Raised when the output stream rejects a write."""


class SerializeError(LeakSplitError):
    """Raised when a finding cannot be encoded for structured output."""
