# SPDX-License-Identifier: MIT
"""
Secret redaction for structured output.

Redaction is opt-in; without it the structured dump reproduces the report
records exactly.
"""

from __future__ import annotations
from typing import Any, Dict

# report keys whose values carry the secret itself
SECRET_KEYS = ("Secret", "Match")


def redact_secret(secret: str) -> str:
    """
    Redact secret showing first 6 + last 4 characters.

    For secrets <= 10 characters, shows only ****.
    For secrets > 10 characters, shows first6****last4.

    Args:
        secret: The secret string to redact

    Returns:
        Redacted string
    """
    if len(secret) <= 10:
        return "****"
    return secret[:6] + "****" + secret[-4:]


def redact_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact the secret-bearing values of a report record.

    Args:
        record: Finding record keyed by report field names

    Returns:
        Copy of the record with Secret and Match redacted
    """
    redacted = record.copy()
    for key in SECRET_KEYS:
        if isinstance(redacted.get(key), str):
            redacted[key] = redact_secret(redacted[key])
    return redacted
