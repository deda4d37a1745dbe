# SPDX-License-Identifier: MIT
"""Split findings into unique findings and duplicates of earlier findings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from leaksplit.core.findings import Finding


@dataclass(frozen=True)
class PartitionResult:
    """Findings split by the duplicate relation, each list in input order."""

    unique: List[Finding] = field(default_factory=list)
    duplicated: List[Finding] = field(default_factory=list)

    def select(self, unique: bool = False) -> List[Finding]:
        """Return the unique group when ``unique`` is set, else the duplicates."""
        return self.unique if unique else self.duplicated


def partition_findings(findings: Iterable[Finding]) -> PartitionResult:
    """
    Partition findings in a single pass over the input.

    The first finding seen for a given (secret, rule_id) pair is unique and
    every later finding with the same pair is a duplicate of it, so a
    finding's group depends on its position in the report.

    Args:
        findings: Findings in report order

    Returns:
        PartitionResult whose two lists together hold every input finding once
    """
    unique: List[Finding] = []
    duplicated: List[Finding] = []
    # first occurrence per key
    accepted: Dict[Tuple[str, str], Finding] = {}

    for finding in findings:
        if finding.duplicate_key in accepted:
            duplicated.append(finding)
        else:
            accepted[finding.duplicate_key] = finding
            unique.append(finding)

    return PartitionResult(unique=unique, duplicated=duplicated)
