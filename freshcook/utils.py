"""Utility functions."""

import json
import re
from typing import Any

_HTML_BRACKETS = re.compile(r"[<>]")
_INGREDIENT_NAME = re.compile(r"^[a-zA-Z0-9\s\-'.,()&]+$")

MAX_INPUT_LENGTH = 1000
MAX_INGREDIENT_NAME_LENGTH = 100


def extract_json_array(text: str) -> Any:
    """
    Return the first [...] block of model output parsed as JSON.
    Falls back to parsing the whole text; raises ValueError if neither works.
    """
    if not text:
        raise ValueError("Empty model output")

    match = re.search(r"\[.*\]", text, flags=re.S)
    cleaned = match.group(0) if match else text.strip()

    return json.loads(cleaned)


def sanitize_input(value: str) -> str:
    """Drop angle brackets, trim, cap length."""
    return _HTML_BRACKETS.sub("", value).strip()[:MAX_INPUT_LENGTH]


def is_valid_ingredient_name(name: str) -> bool:
    """Letters, digits, spaces and common punctuation only, at most 100 chars."""
    return bool(_INGREDIENT_NAME.match(name)) and len(name) <= MAX_INGREDIENT_NAME_LENGTH
