"""Exception types raised by the license audit pipeline."""


class AuditError(Exception):
    """Base exception for licenseaudit."""


class ConfigError(AuditError):
    """Raised when the configuration file cannot be parsed."""


class ImportScanError(AuditError):
    """Raised when a source file cannot be walked or read during import scanning."""


class GoCommandError(AuditError):
    """Raised when the go tool cannot be run or exits with an error."""


class ResolutionError(AuditError):
    """Raised when go list output does not match the requested packages."""


class TemplateError(AuditError):
    """Raised when the license template catalog cannot be loaded."""


class LicenseLookupError(AuditError):
    """Raised when a package directory or license file cannot be read."""
