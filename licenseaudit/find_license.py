"""Logic for locating the license file governing a resolved package."""

from pathlib import Path

from licenseaudit.pkg_info import PackageInfo
from licenseaudit.score_license_name import score_license_name


def _in_gopath_src(info: PackageInfo) -> bool:
    return Path(info.dir).is_relative_to(Path(info.root) / "src")


def license_search_base(info: PackageInfo) -> Path:
    """Return the directory license paths are reported relative to.

    Packages laid out under ``<root>/src`` (GOPATH mode) use that directory,
    anything else (module mode) uses the root itself.
    """
    root = Path(info.root)
    if _in_gopath_src(info):
        return root / "src"
    return root


def best_license_name(directory: Path) -> str:
    """Return the best license-looking regular file in a directory, or ''."""
    best_score = 0.0
    best_name = ""
    for entry in sorted(directory.iterdir()):
        if not entry.is_file():
            continue
        score = score_license_name(entry.name)
        if score > best_score:
            best_score = score
            best_name = entry.name
    return best_name


def find_license(info: PackageInfo, vendor_dir: str = "vendor") -> str:
    """Find the license file for a package, searching up its package tree.

    The search stops below GOPATH/src, at a module root, or at the first
    directory under a vendor directory. Returns the path relative to
    license_search_base, or '' when no license file exists. Errors other
    than a missing license propagate.
    """
    base = license_search_base(info)
    # GOPATH/src is shared by every repository; a module root is not.
    base_is_searched = not _in_gopath_src(info)
    directory = Path(info.dir)
    if not directory.is_relative_to(base):
        return ""

    while True:
        name = best_license_name(directory)
        if name:
            return (directory / name).relative_to(base).as_posix()
        parent = directory.parent
        if directory == base or parent.name == vendor_dir:
            return ""
        if parent == base and not base_is_searched:
            return ""
        directory = parent
