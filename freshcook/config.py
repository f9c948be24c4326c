import os


def _parse_cors_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


CORS_ORIGINS = _parse_cors_origins(os.getenv("CORS_ORIGINS", "*"))
ALLOW_ALL_ORIGINS = CORS_ORIGINS == ["*"]

# LOG_LEVEL: root logging level for the service ("INFO", "DEBUG", ...)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# -----------------------------------
# Google Cloud Vision
# -----------------------------------

# GOOGLE_CLOUD_VISION: API key for images:annotate
GOOGLE_CLOUD_VISION = os.getenv("GOOGLE_CLOUD_VISION")

VISION_API_URL = os.getenv(
    "VISION_API_URL", "https://vision.googleapis.com/v1/images:annotate"
)

# VISION_TIMEOUT_S: request timeout for a single annotate call
VISION_TIMEOUT_S = float(os.getenv("VISION_TIMEOUT_S", "30"))

# -----------------------------------
# OpenRouter / recipe generation
# -----------------------------------

# Both spellings are accepted, OPEN_ROUTER_API_KEY wins
OPENROUTER_API_KEY = os.getenv("OPEN_ROUTER_API_KEY") or os.getenv("OPENROUTER_API_KEY")

OPENROUTER_BASE_URL = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")

# RECIPE_MODEL: any chat model id routed by OpenRouter
RECIPE_MODEL = os.getenv("RECIPE_MODEL", "anthropic/claude-3.5-sonnet")

# Sent as HTTP-Referer / X-Title for OpenRouter attribution
APP_URL = os.getenv("APP_URL", "https://freshcook-app.netlify.app")
APP_TITLE = os.getenv("APP_TITLE", "FreshCook Recipe Generator")
