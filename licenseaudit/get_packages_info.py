"""Logic for resolving import paths to package metadata with go list."""

import logging
import posixpath
from itertools import islice
from collections.abc import Mapping, Sequence
from pathlib import Path

from licenseaudit.decode_json_stream import decode_json_stream
from licenseaudit.errors import ResolutionError
from licenseaudit.pkg_info import PackageInfo, PackageResolution, ResolutionStatus
from licenseaudit.run_go import run_go

logger = logging.getLogger(__name__)

LIST_ARGS = ("list", "-e", "-json")


def _query(
    pkgs: Sequence[str],
    env: Mapping[str, str] | None,
    go_binary: str,
    cwd: Path | str | None,
    timeout: float | None,
) -> tuple[str, list[PackageInfo]]:
    args = [*LIST_ARGS, *pkgs]
    cmd_str = " ".join([go_binary, *args])
    out = run_go(args, env, go_binary=go_binary, cwd=cwd, timeout=timeout)
    # Output past the requested records, such as go: downloading lines, is
    # never read.
    records = islice(decode_json_stream(out), len(pkgs))
    try:
        infos = [PackageInfo.from_go_list(r) for r in records]
    except ValueError as exc:
        msg = f"could not decode the output of {cmd_str}: {exc}"
        raise ResolutionError(msg) from exc
    return cmd_str, infos


def vendor_path(vendor_root: str, import_path: str) -> str:
    """Rewrite an import path under the vendor import root."""
    return posixpath.join(vendor_root, import_path)


def _degrade(info: PackageInfo) -> PackageResolution:
    reason = info.error.err if info.error else ""
    logger.warning("Could not resolve %s: %s", info.import_path, reason)
    return PackageResolution(
        info.import_path, ResolutionStatus.DEGRADED, info.degraded()
    )


def _retry_vendor(
    info: PackageInfo,
    vendor_root: str,
    env: Mapping[str, str] | None,
    go_binary: str,
    cwd: Path | str | None,
    timeout: float | None,
) -> PackageResolution:
    """Retry an unresolved package under vendor_root, degrading on failure."""
    if not vendor_root:
        return _degrade(info)

    pkg = info.import_path
    cmd_str, retried = _query(
        [vendor_path(vendor_root, pkg)], env, go_binary, cwd, timeout
    )
    if not retried:
        msg = f"could not retrieve package information for {pkg} from {cmd_str}"
        raise ResolutionError(msg)

    vendored = retried[0]
    if vendored.unresolved:
        return _degrade(info)

    logger.debug("Resolved %s under vendor root as %s", pkg, vendored.import_path)
    return PackageResolution(pkg, ResolutionStatus.VENDOR_RESOLVED, vendored)


def get_packages_info(
    pkgs: Sequence[str],
    env: Mapping[str, str] | None = None,
    vendor_root: str = "",
    *,
    go_binary: str = "go",
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> list[PackageResolution]:
    """Resolve every import path in one batched go list query.

    Results follow the order of pkgs. A record naming another package than
    the one requested at its position fails the whole batch. Packages go list
    cannot resolve are retried once under vendor_root, then degraded to a
    placeholder carrying the original error.
    """
    if not pkgs:
        return []

    # TODO: split the list for platforms which do not support massive argument
    # lists.
    cmd_str, infos = _query(pkgs, env, go_binary, cwd, timeout)

    resolutions = []
    for i, pkg in enumerate(pkgs):
        if i >= len(infos):
            msg = f"could not retrieve package information for {pkg} from {cmd_str}"
            raise ResolutionError(msg)
        info = infos[i]
        if info.import_path != pkg:
            msg = (
                f"package information mismatch: asked for {pkg}, "
                f"got {info.import_path}"
            )
            raise ResolutionError(msg)

        if info.unresolved:
            resolutions.append(
                _retry_vendor(info, vendor_root, env, go_binary, cwd, timeout)
            )
        else:
            resolutions.append(
                PackageResolution(pkg, ResolutionStatus.RESOLVED, info)
            )
    return resolutions
