"""Shared fixtures for leaksplit tests."""

import json

import pytest

from leaksplit.core.findings import Finding


def gitleaks_record(secret="s3cr3t", rule_id="generic-api-key", fingerprint="f1", **extra):
    """Build a report record keyed the way gitleaks writes it."""
    record = {"Secret": secret, "RuleID": rule_id, "Fingerprint": fingerprint}
    record.update(extra)
    return record


def full_record(fingerprint="abc123:config.py:aws-access-token:3", secret="AKIAEXAMPLEEXAMPLE00"):
    """A record with every field gitleaks v8 emits."""
    return {
        "Description": "AWS Access Key",
        "StartLine": 3,
        "EndLine": 3,
        "StartColumn": 11,
        "EndColumn": 30,
        "Match": f"aws_key = {secret}",
        "Secret": secret,
        "File": "config.py",
        "SymlinkFile": "",
        "Commit": "abc123",
        "Entropy": 3.52,
        "Author": "Jane Dev",
        "Email": "jane@example.com",
        "Date": "2024-03-01T12:00:00Z",
        "Message": "add config",
        "Tags": ["aws", "key"],
        "RuleID": "aws-access-token",
        "Fingerprint": fingerprint,
    }


def make_finding(secret="s3cr3t", rule_id="generic-api-key", fingerprint="f1", **fields):
    return Finding(secret=secret, rule_id=rule_id, fingerprint=fingerprint, **fields)


@pytest.fixture
def write_report(tmp_path):
    """Write a list of records (or raw text) to a report file and return its path."""

    def _write(records, name="gitleaks-report.json"):
        path = tmp_path / name
        if isinstance(records, str):
            path.write_text(records, encoding="utf-8")
        else:
            path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_records():
    """Two findings sharing a secret and rule, and one distinct finding."""
    return [
        gitleaks_record(secret="a", rule_id="R1", fingerprint="f1"),
        gitleaks_record(secret="a", rule_id="R1", fingerprint="f2"),
        gitleaks_record(secret="b", rule_id="R1", fingerprint="f3"),
    ]


@pytest.fixture
def record():
    """Factory for minimal gitleaks records."""
    return gitleaks_record


@pytest.fixture
def extended_record():
    """Factory for records carrying every gitleaks field."""
    return full_record


@pytest.fixture
def finding():
    """Factory for Finding instances built by attribute name."""
    return make_finding
