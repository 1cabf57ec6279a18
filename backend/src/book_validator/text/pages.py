"""Page-range expressions, as typed into a print dialog.

Counts, inclusively, the pages mentioned in an expression such as
``1-3,5-6,p9`` (6 pages). Whitespace anywhere in the expression is ignored.

Results come in three tiers:
  - a page count for a well-formed expression
  - ``0`` when any element is malformed (the whole expression is rejected)
  - ``None`` when the input is over-long or the total loses integer precision
"""

from __future__ import annotations

import re

from book_validator.config import settings
from book_validator.utils.logging import get_logger

log = get_logger()

# Largest integer a float64 holds exactly; totals above it are not trusted.
MAX_SAFE_INTEGER = 2**53 - 1

# \s plus the byte order mark
_WHITESPACE = re.compile(r"[\s\ufeff]+")
_NOT_PAGE_CHAR = re.compile(r"[^p0-9]")
_DIGIT_RUN = re.compile(r"[0-9]+")


def _utf16_length(text: str) -> int:
    """Length in UTF-16 code units, so characters outside the BMP count twice."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def clean_page_num(token: str) -> int | None:
    """Parse one page token (``"3"``, ``"p3"``, ``" p 3 "``) into its page number.

    Returns None for anything that is not exactly one digit run, optionally
    preceded by ``p``.
    """
    if not isinstance(token, str):
        return None

    cleaned = _WHITESPACE.sub("", token)
    if _NOT_PAGE_CHAR.search(cleaned):
        return None

    runs = list(_DIGIT_RUN.finditer(cleaned))
    if len(runs) != 1:
        return None
    run = runs[0]

    # A trailing "p" ("7p") belongs to neither form
    if run.end() != len(cleaned):
        return None

    # Only "p" can precede the run, so the two forms cannot overlap
    prefix = cleaned[: run.start()]
    with_p = prefix.endswith("p")
    just_num = prefix == ""
    if with_p == just_num:
        return None

    return int(run.group())


def count_pages(raw: str) -> int | None:
    """Count the pages in a comma-separated list of pages and ranges.

    A range that goes down (``5-1``) still counts 5 pages. Returns 0 when the
    expression does not fit the format, None when it is longer than the
    configured limit or the total is beyond integer precision.
    """
    if not isinstance(raw, str):
        return 0

    limit = settings.max_page_expression_length
    length = _utf16_length(raw)
    if length > limit:
        log.debug(f"Page expression rejected: {length} chars > {limit}")
        return None

    total = 0
    for element in raw.split(","):
        bounds = element.split("-")
        if len(bounds) == 1:
            if clean_page_num(bounds[0]) is None:
                log.debug(f"Invalid page token: {element!r}")
                return 0
            total += 1
            continue

        pages = []
        for bound in bounds:
            page = clean_page_num(bound)
            if page is None:
                log.debug(f"Invalid page token in range: {element!r}")
                return 0
            pages.append(page)
        if len(pages) != 2:
            log.debug(f"Range must have exactly two ends: {element!r}")
            return 0
        total += abs(pages[0] - pages[1]) + 1

    if total > MAX_SAFE_INTEGER:
        log.debug(f"Page total {total} exceeds safe integer precision")
        return None
    return total
