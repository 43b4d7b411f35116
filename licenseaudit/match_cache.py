"""Logic for memoizing template matches by license file path."""

import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from licenseaudit.match_templates import MatchResult, match_templates
from licenseaudit.template import Template

logger = logging.getLogger(__name__)

Matcher = Callable[[bytes, Sequence[Template]], MatchResult]


class MatchCache:
    """Scores license files once per absolute path for the lifetime of one run.

    Packages with many subpackages all point at the same top-level license
    file; later lookups return the stored result without touching the file.
    """

    def __init__(
        self, templates: Sequence[Template], matcher: Matcher | None = None
    ) -> None:
        """Initialize an empty cache over a fixed template catalog."""
        self.templates = templates
        self.matcher = matcher or match_templates
        self.results: dict[Path, MatchResult] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self.results)

    def match_file(self, path: Path | str) -> MatchResult:
        """Return the match for the license file at path, scoring it on first use."""
        key = Path(os.path.abspath(path))
        cached = self.results.get(key)
        if cached is not None:
            self.hits += 1
            logger.debug("License match cache hit: %s", key)
            return cached

        self.misses += 1
        result = self.matcher(key.read_bytes(), self.templates)
        self.results[key] = result
        return result
