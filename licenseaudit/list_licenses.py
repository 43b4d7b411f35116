"""Orchestration logic for auditing the licenses of a Go module's imports."""

import logging
import os
from pathlib import Path
from typing import Any

from licenseaudit.errors import LicenseLookupError
from licenseaudit.find_license import find_license, license_search_base
from licenseaudit.fix_env import fix_env
from licenseaudit.get_packages_info import get_packages_info
from licenseaudit.license_record import LicenseRecord
from licenseaudit.list_all_imports import list_all_imports
from licenseaudit.list_standard_packages import (
    build_standard_set,
    list_standard_packages,
)
from licenseaudit.load_templates import load_templates
from licenseaudit.match_cache import MatchCache
from licenseaudit.pkg_info import PackageResolution
from licenseaudit.template import Template

logger = logging.getLogger(__name__)


def derive_vendor_root(
    module_root: Path, gopath: str | None, vendor_dir: str = "vendor"
) -> str:
    """Return ``<module import path>/<vendor_dir>`` when the module sits in GOPATH.

    Returns '' when the module import path cannot be derived.
    """
    if not gopath:
        return ""
    root = module_root.resolve()
    for entry in gopath.split(os.pathsep):
        if not entry:
            continue
        src = Path(entry).resolve() / "src"
        if root.is_relative_to(src) and root != src:
            return f"{root.relative_to(src).as_posix()}/{vendor_dir}"
    return ""


def _license_record(
    resolution: PackageResolution, cache: MatchCache, vendor_dir: str
) -> LicenseRecord:
    info = resolution.info
    if info.error is not None:
        return LicenseRecord(package=info.import_path, error=info.error.err)

    try:
        path = find_license(info, vendor_dir)
        record = LicenseRecord(package=info.import_path, path=path)
        if not path:
            return record
        m = cache.match_file(license_search_base(info) / path)
    except OSError as exc:
        msg = f"could not read license of {info.import_path} in {info.dir}: {exc}"
        raise LicenseLookupError(msg) from exc

    record.score = m.score
    record.template = m.template.identifier if m.template else ""
    record.extra_words = list(m.extra_words)
    record.missing_words = list(m.missing_words)
    return record


def list_licenses(
    module_root: Path | str,
    config: dict[str, Any],
    *,
    gopath: str | None = None,
    templates: list[Template] | None = None,
) -> list[LicenseRecord]:
    """Audit the third-party imports of the module at module_root.

    Returns one record per non-standard import, in import order. Per-package
    resolution failures are reported on the record; everything else raises.
    """
    module_root = Path(module_root)
    vendor_dir = config["vendor_dir"]
    go_cfg = config["go"]
    go_opts: dict[str, Any] = {
        "go_binary": go_cfg["binary"],
        "cwd": module_root,
        "timeout": go_cfg.get("timeout"),
    }

    if templates is None:
        templates = load_templates(config["templates"].get("directory"))

    excluded = set(config.get("exclude_imports") or [])
    deps = [d for d in list_all_imports(module_root, vendor_dir) if d not in excluded]

    gopath = gopath or os.environ.get("GOPATH")
    env = fix_env(gopath)
    std = build_standard_set(list_standard_packages(env, **go_opts))

    vendor_root = config["resolver"].get("vendor_root") or derive_vendor_root(
        module_root, gopath, vendor_dir
    )
    resolutions = get_packages_info(deps, env, vendor_root, **go_opts)

    cache = MatchCache(templates)
    licenses = []
    for resolution in resolutions:
        if resolution.info.import_path in std or resolution.requested in std:
            continue
        licenses.append(_license_record(resolution, cache, vendor_dir))

    logger.info(
        "Audited %d packages, %d license files scored (%d cache hits)",
        len(licenses),
        len(cache),
        cache.hits,
    )
    return licenses
