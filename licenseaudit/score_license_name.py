"""Logic for ranking file names by how much they look like a license file."""

import re

LICENSE_NAME_RE = re.compile(
    r"^(?:"
    r"((?:un)?licen[sc]e)|"
    r"((?:un)?licen[sc]e\.(?:md|markdown|txt))|"
    r"(copy(?:ing|right)(?:\.[^.]+)?)|"
    r"(licen[sc]e\.[^.]+)"
    r")$",
    re.IGNORECASE,
)

# Score for each alternative of LICENSE_NAME_RE, in group order.
GROUP_SCORES = (1.0, 0.9, 0.8, 0.7)


def score_license_name(name: str) -> float:
    """Score a file name, 0.0 meaning it is not a license file."""
    m = LICENSE_NAME_RE.match(name)
    if not m:
        return 0.0
    for group, score in enumerate(GROUP_SCORES, start=1):
        if m.group(group):
            return score
    return 0.0
