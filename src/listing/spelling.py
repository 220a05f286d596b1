"""British-English spelling pass applied to finished copy."""

from __future__ import annotations

import re
from typing import List

# Order matters; none of the targets matches any of the source patterns,
# so applying the pass twice is the same as applying it once.
UK_SPELLINGS = (
    (re.compile("color", re.IGNORECASE | re.ASCII), "colour"),
    (re.compile("favorite", re.IGNORECASE | re.ASCII), "favourite"),
    (re.compile("customization", re.IGNORECASE | re.ASCII), "customisation"),
    (re.compile("personalization", re.IGNORECASE | re.ASCII), "personalisation"),
    (re.compile("organize", re.IGNORECASE | re.ASCII), "organise"),
)


def apply_uk_spelling(text: str) -> str:
    """Rewrite US spellings to UK ones (case-insensitive match, lower-case replacement)."""
    for pattern, replacement in UK_SPELLINGS:
        text = pattern.sub(replacement, text)
    return text


def localize(text: str, enabled: bool) -> str:
    return apply_uk_spelling(text) if enabled else text


def localize_lines(lines: List[str], enabled: bool) -> List[str]:
    return [localize(line, enabled) for line in lines]
