"""
Tests for the Finding model and the duplicate relation.
"""
import pytest
from pydantic import ValidationError

from leaksplit.core.findings import ExtendedFinding, Finding, get_schema


class TestFindingParsing:
    """Report records map onto Finding attributes."""

    def test_minimal_record(self, record):
        finding = Finding.model_validate(record(secret="tok", rule_id="R1", fingerprint="fp"))

        assert finding.secret == "tok"
        assert finding.rule_id == "R1"
        assert finding.fingerprint == "fp"
        assert finding.description is None
        assert finding.tags is None

    def test_full_record_maps_pascal_case_keys(self, extended_record):
        """Match maps to match and RuleID to rule_id."""
        data = extended_record()
        finding = ExtendedFinding.model_validate(data)

        assert finding.match == data["Match"]
        assert finding.rule_id == "aws-access-token"
        assert finding.symlink_file == ""
        assert finding.start_column == 11
        assert finding.entropy == pytest.approx(3.52)
        assert finding.tags == ["aws", "key"]

    def test_unknown_keys_are_kept(self, record):
        data = record(Link="https://example.com/blob/abc123/config.py#L3")
        finding = Finding.model_validate(data)

        assert finding.to_record()["Link"] == data["Link"]

    def test_missing_required_field(self, record):
        data = record()
        del data["Secret"]

        with pytest.raises(ValidationError):
            Finding.model_validate(data)

    def test_no_type_coercion(self, record):
        with pytest.raises(ValidationError):
            Finding.model_validate(record(StartLine="3"))

    def test_negative_line_rejected(self, record):
        with pytest.raises(ValidationError):
            Finding.model_validate(record(StartLine=-1))

    def test_extended_schema_requires_every_field(self, record):
        with pytest.raises(ValidationError):
            ExtendedFinding.model_validate(record())


class TestFindingBehaviour:
    """Duplicate relation, immutability and serialisation."""

    def test_is_duplicate_of_same_secret_and_rule(self, finding):
        first = finding(secret="a", rule_id="R1", fingerprint="f1")
        second = finding(secret="a", rule_id="R1", fingerprint="f2")

        assert first.is_duplicate_of(second)
        assert second.is_duplicate_of(first)
        assert first.is_duplicate_of(first)

    def test_not_duplicate_when_rule_differs(self, finding):
        first = finding(secret="a", rule_id="R1")
        second = finding(secret="a", rule_id="R2")

        assert not first.is_duplicate_of(second)

    def test_not_duplicate_when_secret_differs(self, finding):
        assert not finding(secret="a").is_duplicate_of(finding(secret="b"))

    def test_relation_matches_duplicate_key(self, finding):
        pairs = [("a", "R1"), ("a", "R2"), ("b", "R1")]
        findings = [finding(secret=s, rule_id=r) for s, r in pairs]

        for left in findings:
            for right in findings:
                assert left.is_duplicate_of(right) == (left.duplicate_key == right.duplicate_key)

    def test_fingerprint_ignored_by_relation(self, finding):
        assert finding(fingerprint="x").duplicate_key == finding(fingerprint="y").duplicate_key

    def test_frozen(self, finding):
        f = finding()
        with pytest.raises(ValidationError):
            f.secret = "changed"

    def test_to_record_uses_report_keys(self, finding):
        f = finding(secret="tok", rule_id="R1", fingerprint="fp", start_line=4)

        assert f.to_record() == {
            "Secret": "tok",
            "RuleID": "R1",
            "Fingerprint": "fp",
            "StartLine": 4,
        }


def test_get_schema():
    assert get_schema("minimal") is Finding
    assert get_schema("extended") is ExtendedFinding
    with pytest.raises(ValueError, match="Unknown finding schema"):
        get_schema("compact")
