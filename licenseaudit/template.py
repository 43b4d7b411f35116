"""Data model for a known license template."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Template:
    """A canonical license text, reduced to its word set for matching."""

    title: str
    nickname: str
    spdx_id: str
    words: frozenset[str]

    @property
    def identifier(self) -> str:
        """Short name used in reports."""
        return self.nickname or self.title
