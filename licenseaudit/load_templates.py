"""Logic for loading the catalog of license templates.

Templates use the choosealicense.com layout: a YAML front matter block
delimited by ``---`` lines, followed by the license text.
"""

import logging
from pathlib import Path

import yaml

from licenseaudit.errors import TemplateError
from licenseaudit.match_templates import clean_license_data, make_word_set
from licenseaudit.template import Template

logger = logging.getLogger(__name__)

BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "templates"
FRONT_MATTER_DELIMITER = "---"


def split_front_matter(text: str) -> tuple[str, str]:
    """Split a template into its front matter and body."""
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return "", text
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            return "\n".join(lines[1:i]), "\n".join(lines[i + 1 :])
    msg = "unterminated front matter"
    raise ValueError(msg)


def parse_template(path: Path) -> Template:
    """Parse one template file."""
    try:
        header, body = split_front_matter(path.read_text(encoding="utf-8"))
        meta = yaml.safe_load(header) if header else {}
    except (OSError, ValueError, yaml.YAMLError) as exc:
        msg = f"could not load license template {path}: {exc}"
        raise TemplateError(msg) from exc
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        msg = f"front matter of {path} must be a mapping"
        raise TemplateError(msg)

    return Template(
        title=str(meta.get("title") or path.stem),
        nickname=str(meta.get("nickname") or ""),
        spdx_id=str(meta.get("spdx-id") or ""),
        words=make_word_set(clean_license_data(body)),
    )


def load_templates(directory: Path | str | None = None) -> list[Template]:
    """Load every ``*.txt`` template in directory, defaulting to the bundled set."""
    path = Path(directory) if directory else BUNDLED_TEMPLATES_DIR
    if not path.is_dir():
        msg = f"license template directory not found: {path}"
        raise TemplateError(msg)

    templates = [parse_template(p) for p in sorted(path.glob("*.txt"))]
    if not templates:
        msg = f"no license templates found in {path}"
        raise TemplateError(msg)
    logger.info("Loaded %d license templates from %s", len(templates), path)
    return templates
