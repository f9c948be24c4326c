import logging
import re
from functools import lru_cache
from typing import Optional

from openai import OpenAI

from freshcook.config import APP_TITLE, APP_URL, OPENROUTER_API_KEY, OPENROUTER_BASE_URL

logger = logging.getLogger(__name__)

_QUOTES = re.compile(r"['\"]")
_INVISIBLE = re.compile(r"[\u200b-\u200d\ufeff]")

OPENROUTER_KEY_PREFIXES = ("sk-or-v1-", "ssk-or-v1-")
OPENROUTER_KEY_MIN_LENGTH = 50


def clean_api_key(raw: str) -> str:
    """Strip whitespace, quotes and zero-width characters pasted with the key."""
    return _INVISIBLE.sub("", _QUOTES.sub("", raw.strip()))


def is_valid_openrouter_key(key: Optional[str]) -> bool:
    if not key:
        return False
    return len(key) > OPENROUTER_KEY_MIN_LENGTH and key.startswith(OPENROUTER_KEY_PREFIXES)


@lru_cache
def get_openai_client() -> OpenAI:
    if not OPENROUTER_API_KEY:
        raise RuntimeError("OpenRouter API key not configured")

    api_key = clean_api_key(OPENROUTER_API_KEY)
    if not is_valid_openrouter_key(api_key):
        logger.error(
            "Invalid OpenRouter API key format: length=%s, prefix=%s...",
            len(api_key),
            api_key[:15],
        )
        raise RuntimeError("Invalid OpenRouter API key format")

    logger.info("Initializing OpenAI client for %s", OPENROUTER_BASE_URL)
    return OpenAI(
        api_key=api_key,
        base_url=OPENROUTER_BASE_URL,
        default_headers={"HTTP-Referer": APP_URL, "X-Title": APP_TITLE},
    )
