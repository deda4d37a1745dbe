# SPDX-License-Identifier: MIT
"""
Gitleaks report loading.

A report is a JSON array of finding objects. Loading is all-or-nothing:
either every element validates against the active schema or the whole
load fails.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, List, Union

from pydantic import TypeAdapter, ValidationError

from leaksplit.core.exceptions import DecodeError, ReadError
from leaksplit.core.findings import Finding, get_schema

logger = logging.getLogger(__name__)

# number of validation errors quoted in a DecodeError message
MAX_REPORTED_ERRORS = 5


def load_report(stream: BinaryIO, schema: str = "minimal") -> List[Finding]:
    """
    Decode a gitleaks report from a binary stream.

    Args:
        stream: Readable binary stream holding the JSON report
        schema: Name of the finding schema to validate against

    Returns:
        Findings in the order they appear in the report

    Raises:
        ReadError: If the stream cannot be read
        DecodeError: If the report is malformed or a finding is invalid
    """
    adapter = TypeAdapter(List[get_schema(schema)])

    try:
        data = stream.read()
    except OSError as e:
        raise ReadError(f"Failed to read report: {e}") from e

    try:
        # report keys only; attribute names are for building findings in code
        return adapter.validate_json(data, by_alias=True, by_name=False)
    except ValidationError as e:
        raise DecodeError(f"Invalid gitleaks report: {_describe_errors(e)}") from e


def read_report(path: Union[str, Path], schema: str = "minimal") -> List[Finding]:
    """
    Read a gitleaks report file.

    Raises:
        ReadError: If the file cannot be opened or read
        DecodeError: If the report is malformed or a finding is invalid
    """
    logger.info("reading gitleaks report from %s", path)

    try:
        with open(path, "rb") as f:
            return load_report(f, schema=schema)
    except OSError as e:
        raise ReadError(f"Cannot open report {path}: {e.strerror or e}", path=str(path)) from e


def _describe_errors(exc: ValidationError) -> str:
    """Summarise pydantic errors as 'finding <index>: <key>: <reason>'."""
    messages = []
    for error in exc.errors()[:MAX_REPORTED_ERRORS]:
        loc = error.get("loc", ())
        if not loc:
            messages.append(error["msg"])
        elif len(loc) == 1:
            messages.append(f"finding {loc[0]}: {error['msg']}")
        else:
            key = ".".join(str(part) for part in loc[1:])
            messages.append(f"finding {loc[0]}: {key}: {error['msg']}")

    remaining = exc.error_count() - MAX_REPORTED_ERRORS
    if remaining > 0:
        messages.append(f"... and {remaining} more")
    return "; ".join(messages)
