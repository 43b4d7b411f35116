"""Data model for one line of the license audit."""

from dataclasses import dataclass, field


@dataclass
class LicenseRecord:
    """License information found for one non-standard package."""

    package: str
    path: str = ""  # relative to the package tree, empty if none found
    score: float = 0.0
    template: str = ""
    extra_words: list[str] = field(default_factory=list)
    missing_words: list[str] = field(default_factory=list)
    error: str | None = None
