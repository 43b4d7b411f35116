"""Logic for rendering license audit results as a table or a JSON report."""

import hashlib
import json
import time
from pathlib import Path
from typing import Any

from licenseaudit.license_record import LicenseRecord

# Scores above this are shown without a percentage.
EXACT_SCORE = 0.99


def describe_license(record: LicenseRecord, confidence: float) -> str:
    """Describe the license of one record for console output."""
    if record.template:
        pct = int(100 * record.score)
        if record.score > EXACT_SCORE:
            return record.template
        if record.score >= confidence:
            return f"{record.template} ({pct:2d}%)"
        return f"? ({record.template}, {pct:2d}%)"
    if record.error:
        return record.error.replace("\n", " ")
    return "?"


def fingerprint_config(config: dict[str, Any]) -> str:
    """Return a sha256 of the configuration serialized with sorted keys."""
    canonical = json.dumps(config, sort_keys=True, ensure_ascii=True, default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class LicenseReport:
    """Collects license records and renders them."""

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the report from the configuration used for the audit."""
        self.config_hash = fingerprint_config(config)
        self.confidence = float(config["report"]["confidence"])
        self.records: list[LicenseRecord] = []
        self.start_time = time.time()

    def add_records(self, records: list[LicenseRecord]) -> None:
        """Append records, keeping their order."""
        self.records.extend(records)

    def format_table(self, *, show_words: bool = False) -> str:
        """Render one aligned line per package."""
        if not self.records:
            return ""
        width = max(len(r.package) for r in self.records) + 2
        lines = []
        for r in self.records:
            lines.append(r.package.ljust(width) + describe_license(r, self.confidence))
            near_miss = r.template and self.confidence <= r.score <= EXACT_SCORE
            if show_words and near_miss:
                if r.extra_words:
                    lines.append("\t+words: " + ", ".join(r.extra_words))
                if r.missing_words:
                    lines.append("\t-words: " + ", ".join(r.missing_words))
        return "\n".join(lines)

    def generate_report(self, path: str) -> None:
        """Write the records and summary statistics to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "confidence": self.confidence,
                "total_packages": len(self.records),
            },
            "records": [
                {
                    "package": r.package,
                    "path": r.path,
                    "score": r.score,
                    "template": r.template,
                    "extra_words": r.extra_words,
                    "missing_words": r.missing_words,
                    "error": r.error,
                }
                for r in self.records
            ],
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        template_counts: dict[str, int] = {}
        errored = 0
        unlicensed = 0
        low_confidence = 0

        for r in self.records:
            if r.error:
                errored += 1
                continue
            if not r.path:
                unlicensed += 1
                continue
            if r.template:
                template_counts[r.template] = template_counts.get(r.template, 0) + 1
            if r.score < self.confidence:
                low_confidence += 1

        return {
            "template_counts": template_counts,
            "errored": errored,
            "unlicensed": unlicensed,
            "low_confidence": low_confidence,
        }
