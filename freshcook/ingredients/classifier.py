"""Food-relatedness test for image-service labels."""

from .lexicon import FOOD_KEYWORDS

# Endings a keyword may carry past a shorter label ("pea" -> "peas").
_PLURAL_ENDINGS = ("", "s", "es")


def _keyword_extends_label(keyword: str, label: str) -> bool:
    """
    True when the keyword contains the label as its head word.

    The label must close the keyword ("berry" in "strawberry") or be followed
    only by a plural ending ("grape" in "grapes"). A label that is merely a
    leading fragment ("car" in "carrot") does not count.
    """
    return any(keyword.endswith(label + ending) for ending in _PLURAL_ENDINGS)


def is_food_related(label: str) -> bool:
    """
    Return True if the label names something food-related.

    The raw label is only lowercased; whitespace and punctuation are compared
    as-is. A label matches when it contains a keyword, or a keyword contains
    the label (see _keyword_extends_label).
    """
    label_lower = label.lower()
    if not label_lower:
        return False

    for keyword in FOOD_KEYWORDS:
        if keyword in label_lower or _keyword_extends_label(keyword, label_lower):
            return True
    return False
