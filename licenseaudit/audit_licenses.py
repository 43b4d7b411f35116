"""List the licenses of the third-party packages imported by a Go module.

Example:
    python -m licenseaudit.audit_licenses path/to/module --json licenses.json
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from licenseaudit.errors import AuditError
from licenseaudit.license_report import LicenseReport
from licenseaudit.list_licenses import list_licenses
from licenseaudit.load_config import load_config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the license audit."""
    ap = argparse.ArgumentParser(
        description="Report the license of every package imported by a Go module.",
    )
    ap.add_argument(
        "module_root",
        type=Path,
        help="Root directory of the Go module to audit",
    )
    ap.add_argument(
        "--gopath",
        help="GOPATH passed to the go tool (default: $GOPATH)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--templates",
        help="Directory of license templates (default: bundled templates)",
    )
    ap.add_argument(
        "--json",
        dest="json_path",
        help="Also write a JSON report to this file",
    )
    ap.add_argument(
        "--confidence",
        type=float,
        help="Minimum score for a license to be reported as identified",
    )
    ap.add_argument(
        "-w",
        "--words",
        action="store_true",
        help="Show extra and missing words of imperfect matches",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress information",
    )
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the license audit."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.module_root.is_dir():
        msg = f"Module root is not a directory: {args.module_root}"
        raise SystemExit(msg)

    try:
        config = load_config(args.config)
        if args.templates:
            config["templates"]["directory"] = args.templates
        if args.confidence is not None:
            config["report"]["confidence"] = args.confidence

        records = list_licenses(args.module_root, config, gopath=args.gopath)
    except AuditError as exc:
        raise SystemExit(str(exc)) from exc

    report = LicenseReport(config)
    report.add_records(records)
    table = report.format_table(show_words=args.words)
    if table:
        print(table)
    if args.json_path:
        report.generate_report(args.json_path)
        print(f"Report written to {args.json_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
