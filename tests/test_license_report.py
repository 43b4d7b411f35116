"""Tests for the LicenseReport rendering."""

import json
from pathlib import Path

from licenseaudit.license_record import LicenseRecord
from licenseaudit.license_report import (
    LicenseReport,
    describe_license,
    fingerprint_config,
)
from licenseaudit.load_config import load_config


def sample_records() -> list[LicenseRecord]:
    """Build one record of each kind."""
    return [
        LicenseRecord(
            package="github.com/exact/pkg",
            path="github.com/exact/LICENSE",
            score=1.0,
            template="MIT",
        ),
        LicenseRecord(
            package="github.com/close/pkg",
            path="github.com/close/LICENSE",
            score=0.93,
            template="New BSD",
            extra_words=["acme"],
            missing_words=["neither"],
        ),
        LicenseRecord(
            package="github.com/weak/pkg",
            path="github.com/weak/COPYING",
            score=0.41,
            template="ISC",
        ),
        LicenseRecord(package="github.com/none/pkg"),
        LicenseRecord(
            package="lib/gone",
            error='cannot find package "lib/gone"\nin any of:',
        ),
    ]


def test_describe_license() -> None:
    """Verify the wording for each confidence band."""
    exact, close, weak, none, errored = sample_records()
    assert describe_license(exact, 0.9) == "MIT"
    assert describe_license(close, 0.9) == "New BSD (93%)"
    assert describe_license(weak, 0.9) == "? (ISC, 41%)"
    assert describe_license(none, 0.9) == "?"
    assert describe_license(errored, 0.9) == 'cannot find package "lib/gone" in any of:'


def test_format_table_aligns_columns() -> None:
    """Verify that one aligned line is printed per record."""
    report = LicenseReport(load_config(None))
    report.add_records(sample_records())
    lines = report.format_table().splitlines()
    assert len(lines) == 5  # noqa: PLR2004
    assert lines[0].startswith("github.com/exact/pkg  ")
    assert len({line.index(line.split()[1]) for line in lines}) == 1


def test_format_table_words() -> None:
    """Verify that word differences are listed for imperfect confident matches."""
    report = LicenseReport(load_config(None))
    report.add_records(sample_records())
    table = report.format_table(show_words=True)
    assert "\t+words: acme" in table
    assert "\t-words: neither" in table
    assert table.count("words:") == 2  # noqa: PLR2004


def test_format_table_empty() -> None:
    """Verify that an empty audit renders nothing."""
    assert LicenseReport(load_config(None)).format_table() == ""


def test_generate_report(tmp_path: Path) -> None:
    """Verify that the JSON report is generated correctly."""
    report = LicenseReport(load_config(None))
    report.add_records(sample_records())

    output_file = tmp_path / "report.json"
    report.generate_report(str(output_file))

    content = json.loads(output_file.read_text(encoding="utf-8"))
    assert content["meta"]["config_hash"] == fingerprint_config(load_config(None))
    assert content["meta"]["confidence"] == 0.9  # noqa: PLR2004
    assert content["meta"]["total_packages"] == 5  # noqa: PLR2004
    assert [r["package"] for r in content["records"]][0] == "github.com/exact/pkg"
    assert content["records"][4]["error"].startswith("cannot find package")

    stats = content["stats"]
    assert stats["template_counts"] == {"MIT": 1, "New BSD": 1, "ISC": 1}
    assert stats["errored"] == 1
    assert stats["unlicensed"] == 1
    assert stats["low_confidence"] == 1


def test_fingerprint_config_stability() -> None:
    """Verify that the fingerprint is stable regardless of key order."""
    config1 = {"b": 2, "a": 1, "nested": {"y": 2, "x": 1}}
    config2 = {"a": 1, "b": 2, "nested": {"x": 1, "y": 2}}
    assert fingerprint_config(config1) == fingerprint_config(config2)
    assert fingerprint_config(config1) != fingerprint_config({"a": 1})
