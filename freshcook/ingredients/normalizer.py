import re

_NON_LETTER_OR_SPACE = re.compile(r"[^a-z ]")


def normalize_ingredient(raw: str) -> str:
    """
    Canonical display form: lowercase, keep only a-z and spaces, trim,
    capitalize each space-separated word.

    "  olive OIL (extra-virgin) " -> "Olive Oil Extravirgin"
    """
    stripped = _NON_LETTER_OR_SPACE.sub("", raw.lower()).strip(" ")
    return " ".join(word[:1].upper() + word[1:] for word in stripped.split(" "))
