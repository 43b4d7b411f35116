"""Logic for listing the import paths referenced by a Go source tree.

This is a line scanner, not a Go parser: it only looks for the ``import``
keyword and quoted literals, and stops reading a file at the first line
mentioning ``func``. An ``import`` token inside a comment or string placed
before the real import declarations will be misread.
"""

import logging
import os
from pathlib import Path

from licenseaudit.errors import ImportScanError
from licenseaudit.parse_import_block import first_quoted, parse_import_block

logger = logging.getLogger(__name__)


def _raise_walk_error(exc: OSError) -> None:
    msg = f"error walking the path {exc.filename}: {exc}"
    raise ImportScanError(msg) from exc


def list_source_files(
    root: Path | str, vendor_dir: str = "vendor", suffix: str = ".go"
) -> list[Path]:
    """List source files under root, pruning every directory named vendor_dir."""
    files = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames[:] = sorted(d for d in dirnames if d != vendor_dir)
        files.extend(Path(dirpath) / f for f in sorted(filenames) if f.endswith(suffix))
    return files


def scan_file_imports(path: Path) -> set[str]:
    """Collect the import paths declared at the top of a single source file."""
    imports: set[str] = set()
    try:
        with path.open(encoding="utf-8", errors="surrogateescape") as f:
            lines = iter(f)
            for line in lines:
                if "import" in line:
                    if "(" in line:
                        imports.update(parse_import_block(lines))
                    else:
                        pkg = first_quoted(line)
                        if pkg:
                            imports.add(pkg)

                # Declarations come before the first function body.
                if "func" in line:
                    break
    except OSError as exc:
        msg = f"read error in file {path}: {exc}"
        raise ImportScanError(msg) from exc
    return imports


def list_all_imports(
    root: Path | str, vendor_dir: str = "vendor", suffix: str = ".go"
) -> list[str]:
    """Return the distinct import paths referenced under root, sorted."""
    imports: set[str] = set()
    files = list_source_files(root, vendor_dir, suffix)
    for path in files:
        imports.update(scan_file_imports(path))
    logger.info("Found %d distinct imports in %d files", len(imports), len(files))
    return sorted(imports)
