"""Logic for reading the paths of a grouped Go import block."""

import re
from collections.abc import Iterator

QUOTED_RE = re.compile(r'"[^"]+"')


def first_quoted(line: str) -> str | None:
    """Return the first double-quoted literal on a line, without the quotes."""
    match = QUOTED_RE.search(line)
    if match:
        return match.group(0).strip('"')
    return None


def parse_import_block(lines: Iterator[str]) -> list[str]:
    """Consume lines up to the closing parenthesis and collect import paths.

    The line holding ``)`` is consumed too. At most one path is taken per line.
    """
    imports = []
    for line in lines:
        path = first_quoted(line)
        if path:
            imports.append(path)
        if ")" in line:
            break
    return imports
