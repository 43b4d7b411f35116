"""Data models for packages resolved through go list."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class PackageError:
    """The per-package error reported by ``go list -e``."""

    err: str
    pos: str = ""
    import_stack: tuple[str, ...] = ()

    @classmethod
    def from_go_list(cls, raw: dict[str, Any]) -> "PackageError":
        """Build a PackageError from the ``Error`` object of a go list record."""
        return cls(
            err=str(raw.get("Err") or ""),
            pos=str(raw.get("Pos") or ""),
            import_stack=tuple(str(x) for x in raw.get("ImportStack") or ()),
        )


@dataclass(frozen=True)
class PackageInfo:
    """Resolved metadata for one import path."""

    import_path: str
    name: str = ""
    dir: str = ""
    root: str = ""
    error: PackageError | None = None

    @classmethod
    def from_go_list(cls, record: dict[str, Any]) -> "PackageInfo":
        """Build a PackageInfo from one decoded go list -json record."""
        raw_error = record.get("Error")
        error = None
        if isinstance(raw_error, dict):
            error = PackageError.from_go_list(raw_error)
        return cls(
            import_path=str(record.get("ImportPath") or ""),
            name=str(record.get("Name") or ""),
            dir=str(record.get("Dir") or ""),
            root=str(record.get("Root") or ""),
            error=error,
        )

    @property
    def unresolved(self) -> bool:
        """True when go list failed and could not even name the package."""
        return self.error is not None and not self.name

    def degraded(self) -> "PackageInfo":
        """Return a placeholder copy named after its import path."""
        return replace(self, name=self.import_path)


class ResolutionStatus(Enum):
    """How a requested import path ended up resolved."""

    RESOLVED = "resolved"
    VENDOR_RESOLVED = "vendor_resolved"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class PackageResolution:
    """The outcome of resolving one requested import path."""

    requested: str
    status: ResolutionStatus
    info: PackageInfo
