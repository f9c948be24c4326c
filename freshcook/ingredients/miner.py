"""Dictionary mining of ingredient names from OCR text."""

import re
from typing import List

from .lexicon import COMMON_INGREDIENTS

# One pattern per dictionary term: whole word, optional single trailing "s".
_PATTERNS = tuple(
    (term, re.compile(rf"\b{re.escape(term)}s?\b", re.IGNORECASE | re.ASCII))
    for term in COMMON_INGREDIENTS
)


def extract_ingredients_from_text(text: str) -> List[str]:
    """
    Return dictionary terms mentioned in text, in dictionary order.

    Callers lowercase the OCR block once before calling; matching is
    case-insensitive regardless. The dictionary spelling is returned, not the
    matched substring, so "Eggs" yields "egg".
    """
    if not text:
        return []
    return [term for term, pattern in _PATTERNS if pattern.search(text)]
