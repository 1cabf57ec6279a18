"""Title comparison and validation for catalog search.

Two titles are "the same" when they spell the same sequence of letters once
accents, diacritics and ligatures are set aside:

    "Æsop's Fables"  ==  "AEsops Fables"   yes
    "Æsop's Fables"  ==  "aesops fables"   no, case still matters
    "Café 2"         ==  "Cafe"            yes

Everything that is not a letter (spaces, punctuation, digits, symbols) is
dropped before comparing.
"""

from __future__ import annotations

import re
import unicodedata

from book_validator.text.ligatures import expand_ligatures, get_blocked_titles
from book_validator.utils.logging import get_logger

log = get_logger()

# Combining diacritical marks, extended, supplement, for symbols, half marks
_COMBINING_MARKS = re.compile(
    r"[\u0300-\u036F\u1AB0-\u1ACE\u1DC0-\u1DFF\u20D0-\u20F0\uFE20-\uFE2F]"
)

# Besides letters: ASCII digits, space, hyphen, straight and curly quotes, plus
# the Devanagari, Devanagari Extended and Vedic Extensions blocks.
_ALLOWED_NON_LETTER = re.compile(
    r"[0-9\-'\" \u2018\u2019\u201C\u201D\u0900-\u097F\uA8E0-\uA8FF\u1CD0-\u1CFA]"
)


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def letter_skeleton(title: str) -> str:
    """Reduce a title to the letters compared by is_same_title().

    1. Keep only Unicode letters
    2. NFKD decompose (splits accented letters, folds width/font variants)
    3. Drop anything decomposition exposed that is not a letter, and any
       combining mark
    4. Expand ligatures (æ → ae, ﬀ → ff, ...)
    """
    letters = "".join(ch for ch in title if _is_letter(ch))
    letters = unicodedata.normalize("NFKD", letters)
    letters = "".join(
        ch for ch in letters if _is_letter(ch) and not _COMBINING_MARKS.match(ch)
    )
    return expand_ligatures(letters)


def is_same_title(a: str, b: str) -> bool:
    """Are the two titles effectively the same when searching?

    Returns False when either argument is not a string.
    """
    if not isinstance(a, str) or not isinstance(b, str):
        return False
    return letter_skeleton(a) == letter_skeleton(b)


def is_title(title: str) -> bool:
    """Check a title against the catalog's allow-list.

    Valid titles:
    - are not any casing of a blocked title ("Boaty McBoatface")
    - use only letters, digits 0-9, spaces, hyphens and quotes
    - have no leading or trailing whitespace (and no tabs or newlines at all)
    """
    if not isinstance(title, str):
        return False

    lowered = title.lower()
    if any(lowered == blocked.lower() for blocked in get_blocked_titles()):
        log.debug(f"Blocked title: {title!r}")
        return False

    normalized = unicodedata.normalize("NFKC", title)
    if not normalized or not all(
        _is_letter(ch) or _ALLOWED_NON_LETTER.match(ch) for ch in normalized
    ):
        return False

    return title == title.strip()
