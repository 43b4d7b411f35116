"""Logic for listing and matching Go standard library packages."""

from collections.abc import Iterable, Mapping
from pathlib import Path

from licenseaudit.run_go import run_go


def list_standard_packages(
    env: Mapping[str, str] | None = None,
    *,
    go_binary: str = "go",
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> list[str]:
    """Return the import paths of the standard library as reported by go list."""
    out = run_go(["list", "std"], env, go_binary=go_binary, cwd=cwd, timeout=timeout)
    return [line.strip() for line in out.splitlines() if line.strip()]


def build_standard_set(names: Iterable[str]) -> frozenset[str]:
    """Build the membership set used to drop standard packages."""
    return frozenset(names)
