# SPDX-License-Identifier: MIT
"""Rendering of a group of findings for output."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import BinaryIO, Sequence

from pydantic_core import PydanticSerializationError

from leaksplit.core.exceptions import SerializeError, WriteError
from leaksplit.core.findings import Finding
from leaksplit.core.redaction import redact_record

logger = logging.getLogger(__name__)


class OutputFormat(Enum):
    """Supported output modes."""

    TEXT = "text"  # one fingerprint per line
    JSON = "json"  # full records, pretty printed


def render(
    findings: Sequence[Finding],
    output_format: OutputFormat,
    *,
    sort: bool = True,
    redact: bool = False,
) -> bytes:
    """
    Render a group of findings.

    Args:
        findings: The selected group, in report order
        output_format: TEXT for fingerprints, JSON for full records
        sort: Sort TEXT output by fingerprint (ordinal comparison)
        redact: Redact secrets in JSON output

    Returns:
        UTF-8 encoded output

    Raises:
        SerializeError: If a finding cannot be encoded as JSON
    """
    if output_format is OutputFormat.TEXT:
        return render_fingerprints(findings, sort=sort)
    if output_format is OutputFormat.JSON:
        return render_json(findings, redact=redact)
    raise ValueError(f"Unsupported output format: {output_format!r}")


def render_fingerprints(findings: Sequence[Finding], sort: bool = True) -> bytes:
    if sort:
        findings = sorted(findings, key=lambda finding: finding.fingerprint)
    return "".join(f"{finding.fingerprint}\n" for finding in findings).encode("utf-8")


def render_json(findings: Sequence[Finding], redact: bool = False) -> bytes:
    try:
        records = [finding.to_record() for finding in findings]
        if redact:
            records = [redact_record(record) for record in records]
        output = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        return output.encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializeError(f"Failed to encode findings as JSON: {e}") from e


def write_output(data: bytes, stream: BinaryIO) -> None:
    """
    Write rendered output to a binary stream in a single write.

    Raises:
        WriteError: If the stream rejects the write
    """
    logger.debug("writing %d bytes of output", len(data))
    try:
        stream.write(data)
        stream.flush()
    except (OSError, ValueError) as e:
        raise WriteError(f"Failed to write output: {e}") from e
