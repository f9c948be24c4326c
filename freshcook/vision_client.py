"""Google Cloud Vision `images:annotate` client."""

import logging
import re
from typing import Any, Dict, Optional

import requests

from freshcook.config import GOOGLE_CLOUD_VISION, VISION_API_URL, VISION_TIMEOUT_S

logger = logging.getLogger(__name__)

LABEL_MAX_RESULTS = 20
TEXT_MAX_RESULTS = 10

# Google API keys: "AIza" followed by 35 URL-safe characters
_VISION_KEY = re.compile(r"AIza[0-9A-Za-z_-]{35}")


class VisionAPIError(RuntimeError):
    """Vision call failed; `message` is user-facing, `details` is diagnostic."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


def is_valid_vision_key(key: Optional[str]) -> bool:
    if not key:
        return False
    return _VISION_KEY.fullmatch(key) is not None


def _build_request(image_b64: str) -> Dict[str, Any]:
    return {
        "requests": [
            {
                "image": {"content": image_b64},
                "features": [
                    {"type": "LABEL_DETECTION", "maxResults": LABEL_MAX_RESULTS},
                    {"type": "TEXT_DETECTION", "maxResults": TEXT_MAX_RESULTS},
                ],
            }
        ]
    }


def annotate_image(image_b64: str) -> Dict[str, Any]:
    """
    Request label and text detection for a base64-encoded image.

    Returns the raw first entry of `responses` (labelAnnotations /
    textAnnotations, both optional). Raises VisionAPIError on any failure.
    """
    if not GOOGLE_CLOUD_VISION:
        logger.error("Google Cloud Vision API key not found")
        raise VisionAPIError(
            "Google Cloud Vision API key not configured",
            "Please set GOOGLE_CLOUD_VISION environment variable",
        )

    logger.info("Making request to Google Vision API, b64_len=%s", len(image_b64))
    try:
        response = requests.post(
            VISION_API_URL,
            params={"key": GOOGLE_CLOUD_VISION},
            json=_build_request(image_b64),
            timeout=VISION_TIMEOUT_S,
        )
    except requests.RequestException as e:
        logger.error("Network error calling Google Vision API: %s", e)
        raise VisionAPIError("Network error calling Google Vision API", str(e)) from e

    if not response.ok:
        logger.error(
            "Google Vision API error: status=%s, reason=%s, body=%s",
            response.status_code,
            response.reason,
            response.text,
        )
        raise VisionAPIError(
            "Failed to analyze image with Google Vision API",
            f"API returned {response.status_code}: {response.reason}",
        )

    try:
        data = response.json()
    except ValueError as e:
        logger.error("Failed to parse Vision API response: %s", e)
        raise VisionAPIError("Invalid response from Google Vision API", str(e)) from e

    responses = data.get("responses") if isinstance(data, dict) else None
    if not isinstance(responses, list) or not responses:
        logger.error("Invalid Vision API response structure: %s", data)
        raise VisionAPIError("No response from Google Vision API")

    first = responses[0]
    if not isinstance(first, dict):
        logger.error("Invalid Vision API response entry: %s", first)
        raise VisionAPIError("No response from Google Vision API")

    if first.get("error"):
        error = first["error"]
        logger.error("Google Vision API response error: %s", error)
        message = error.get("message") if isinstance(error, dict) else None
        raise VisionAPIError("Google Vision API error", message or "Unknown API error")

    logger.info(
        "Vision API returned %s labels, %s text annotations",
        len(first.get("labelAnnotations") or []),
        len(first.get("textAnnotations") or []),
    )
    return first
