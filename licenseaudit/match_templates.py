"""Logic for scoring license text against the known templates.

The score is the Dice coefficient of the two word sets: 0.0 when no word is
shared, 1.0 when the texts are equal once case, punctuation, layout and
copyright lines are ignored.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from licenseaudit.template import Template

WORDS_RE = re.compile(r"[\w']+")
COPYRIGHT_RE = re.compile(
    r"\s*copyright\s*(?:©|\(c\))?\s*(?:\d{4}|\[year\]|\[yyyy\]).*",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class MatchResult:
    """The best template match for one license text."""

    score: float
    template: Template | None
    extra_words: list[str] = field(default_factory=list)
    missing_words: list[str] = field(default_factory=list)


def clean_license_data(text: str) -> str:
    """Lowercase text and drop copyright statements."""
    return COPYRIGHT_RE.sub("", text.lower())


def make_word_set(text: str) -> frozenset[str]:
    """Return the set of words in text."""
    return frozenset(WORDS_RE.findall(text))


def match_templates(data: bytes, templates: Sequence[Template]) -> MatchResult:
    """Return the best scoring template for the license bytes.

    Ties keep the earliest template.
    """
    words = make_word_set(clean_license_data(data.decode("utf-8", errors="replace")))
    best = MatchResult(score=-1.0, template=None)
    for t in templates:
        common = len(words & t.words)
        total = len(words) + len(t.words)
        score = 2 * common / total if total else 0.0
        if score > best.score:
            best = MatchResult(
                score=score,
                template=t,
                extra_words=sorted(words - t.words),
                missing_words=sorted(t.words - words),
            )
    if best.template is None:
        return MatchResult(score=0.0, template=None, extra_words=sorted(words))
    return best
