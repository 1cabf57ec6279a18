"""HTML sanitizing for user-supplied catalog text.

The work is done by bleach: only the configured tags (``<b>`` and ``<i>`` by
default) survive, every other tag is escaped rather than dropped, and quotes
are escaped on top so the result is also safe inside attribute values.
"""

from __future__ import annotations

import bleach

from book_validator.config import settings


def clean_for_html(dirty: str) -> str:
    """Return ``dirty`` made safe for embedding into HTML."""
    if not isinstance(dirty, str):
        raise TypeError(f"clean_for_html expects str, got {type(dirty).__name__}")

    clean = bleach.clean(
        dirty,
        tags=set(settings.allowed_html_tags),
        attributes={},
        strip=False,
    )
    clean = clean.replace('"', "&quot;")
    clean = clean.replace("'", "&#x27;")
    return clean
