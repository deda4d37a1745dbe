# SPDX-License-Identifier: MIT
"""Finding records read from a gitleaks report."""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from pydantic.alias_generators import to_pascal


class Finding(BaseModel):
    """One secret occurrence reported by gitleaks.

    Report keys are PascalCase (``Secret``, ``Fingerprint``, ...) except for
    ``RuleID``. Only ``Secret``, ``RuleID`` and ``Fingerprint`` are required;
    the remaining gitleaks fields are kept when present. Keys this model does
    not declare are preserved as extra data.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="allow",
        alias_generator=to_pascal,
        populate_by_name=True,
    )

    secret: str  # the matched secret text
    rule_id: str = Field(alias="RuleID")  # detection rule, e.g. 'aws-access-token'
    fingerprint: str  # commit:file:rule:line, unique per occurrence

    description: Optional[str] = None
    start_line: Optional[NonNegativeInt] = None
    end_line: Optional[NonNegativeInt] = None
    start_column: Optional[NonNegativeInt] = None
    end_column: Optional[NonNegativeInt] = None
    match: Optional[str] = None  # full text matched by the rule regex
    file: Optional[str] = None
    symlink_file: Optional[str] = None
    commit: Optional[str] = None
    entropy: Optional[float] = None
    author: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None
    message: Optional[str] = None
    tags: Optional[List[str]] = None

    @property
    def duplicate_key(self) -> Tuple[str, str]:
        """The (secret, rule_id) pair that identifies duplicates."""
        return (self.secret, self.rule_id)

    def is_duplicate_of(self, other: "Finding") -> bool:
        """True when both findings share the same (secret, rule_id) pair."""
        return self.duplicate_key == other.duplicate_key

    def to_record(self) -> Dict[str, Any]:
        """Convert the finding back to its report representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ExtendedFinding(Finding):
    """A finding carrying the full gitleaks field set, all of it required."""

    description: str
    start_line: NonNegativeInt
    end_line: NonNegativeInt
    start_column: NonNegativeInt
    end_column: NonNegativeInt
    match: str
    file: str
    symlink_file: str
    commit: str
    entropy: float
    author: str
    email: str
    date: str
    message: str
    tags: List[str]


SCHEMAS: Dict[str, Type[Finding]] = {
    "minimal": Finding,
    "extended": ExtendedFinding,
}


def get_schema(name: str) -> Type[Finding]:
    """Return the finding model registered under ``name``."""
    try:
        return SCHEMAS[name]
    except KeyError:
        raise ValueError(
            f"Unknown finding schema {name!r}; expected one of {', '.join(SCHEMAS)}"
        ) from None
