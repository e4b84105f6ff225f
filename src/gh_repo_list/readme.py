"""Idempotent replacement of the marker-delimited repository section.

The region between the two markers belongs to this tool and is rewritten on
every run. Everything outside it is left exactly as found. If the document has
no markers yet, a small section holding them is appended first.
"""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

START_MARK = "<!-- REPO_LIST:START -->"
END_MARK = "<!-- REPO_LIST:END -->"
SECTION_HEADING = "## Featured repository"


class SectionError(ValueError):
    """Raised when the markers are present but do not form one region."""


def section_template(start=START_MARK, end=END_MARK):
    return f"\n\n{SECTION_HEADING}\n\n{start}\n{end}\n"


def apply_section(text, body, start=START_MARK, end=END_MARK):
    if start in body or end in body:
        raise SectionError(f"section body must not contain {start!r} or {end!r}")
    n_start = text.count(start)
    n_end = text.count(end)
    if n_start == 0 and n_end == 0:
        text += section_template(start, end)
    elif n_start != 1 or n_end != 1:
        raise SectionError(
            f"expected one {start!r} and one {end!r}, found {n_start} and {n_end}"
        )
    elif text.index(end) < text.index(start):
        raise SectionError(f"{end!r} appears before {start!r}")

    pattern = re.compile(re.escape(start) + r"[\s\S]*?" + re.escape(end))
    # callable replacement so backslashes in the body stay literal
    return pattern.sub(lambda _m: f"{start}\n{body}\n{end}", text, count=1)


def update_section(path, body, start=START_MARK, end=END_MARK, dry_run=False):
    p = Path(path)
    md = p.read_text(encoding="utf-8")
    new_md = apply_section(md, body, start, end)
    if new_md == md:
        return "unchanged"
    if dry_run:
        logger.info("Dry run, not writing %s", p)
    else:
        p.write_text(new_md, encoding="utf-8")
    return "changed"
