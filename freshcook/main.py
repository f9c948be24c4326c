"""Main FastAPI application."""

import asyncio
import logging
import sys
import time
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from freshcook import config
from freshcook.openai_client import clean_api_key, is_valid_openrouter_key
from freshcook.services import RecipeGenerationError, analyze_image, generate_recipes
from freshcook.utils import is_valid_ingredient_name, sanitize_input
from freshcook.vision_client import VisionAPIError, is_valid_vision_key

logging.basicConfig(
    level=config.LOG_LEVEL,
    stream=sys.stdout,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="FreshCook")

# -----------------------------------
# CORS
# -----------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=not config.ALLOW_ALL_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


class AnalyzeImageRequest(BaseModel):
    image: str = ""
    mimeType: Optional[str] = None


class GenerateRecipesRequest(BaseModel):
    ingredients: List[str] = Field(default_factory=list)


def _error(status: int, error: str, details: Optional[str] = None) -> HTTPException:
    detail = {"error": error}
    if details:
        detail["details"] = details
    return HTTPException(status, detail)


# -----------------------------------
# Health
# -----------------------------------

@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/health/keys")
def health_keys():
    """Report whether upstream credentials look usable. Keys are never echoed."""
    openrouter_key = clean_api_key(config.OPENROUTER_API_KEY or "")
    return {
        "vision": {
            "configured": bool(config.GOOGLE_CLOUD_VISION),
            "valid_format": is_valid_vision_key(config.GOOGLE_CLOUD_VISION),
        },
        "openrouter": {
            "configured": bool(config.OPENROUTER_API_KEY),
            "valid_format": is_valid_openrouter_key(openrouter_key),
            "needed_cleaning": bool(config.OPENROUTER_API_KEY)
            and openrouter_key != config.OPENROUTER_API_KEY,
        },
    }


# -----------------------------------
# /analyze-image
# -----------------------------------

@app.post("/analyze-image")
async def analyze_image_endpoint(body: AnalyzeImageRequest):
    if not body.image.strip():
        raise _error(400, "No image provided")

    total_start = time.time()
    logging.info(
        "[PIPELINE] Starting /analyze-image: mime_type=%s, b64_len=%s",
        body.mimeType,
        len(body.image),
    )

    try:
        ingredients = await asyncio.to_thread(analyze_image, body.image)
    except VisionAPIError as e:
        raise _error(500, e.message, e.details)
    except Exception as e:
        logging.exception("Error in /analyze-image")
        raise _error(500, "Internal server error", str(e))

    logging.info(
        "[PIPELINE] /analyze-image completed in %sms, ingredients=%s",
        round((time.time() - total_start) * 1000, 2),
        len(ingredients),
    )
    return {"ingredients": ingredients, "success": True}


# -----------------------------------
# /generate-recipes
# -----------------------------------

@app.post("/generate-recipes")
async def generate_recipes_endpoint(body: GenerateRecipesRequest):
    ingredients = [sanitize_input(name) for name in body.ingredients]
    ingredients = [name for name in ingredients if name]
    if not ingredients:
        raise _error(400, "No ingredients provided")

    invalid = [name for name in ingredients if not is_valid_ingredient_name(name)]
    if invalid:
        raise _error(400, "Invalid ingredient name", ", ".join(invalid))

    total_start = time.time()
    logging.info("[PIPELINE] Starting /generate-recipes: ingredients=%s", ingredients)

    try:
        recipes = await asyncio.to_thread(generate_recipes, ingredients)
    except RecipeGenerationError as e:
        raise _error(e.status, e.message, e.details)
    except RuntimeError as e:
        # Missing or malformed OpenRouter key
        logging.error("Recipe service misconfigured: %s", e)
        raise _error(500, str(e))
    except Exception as e:
        logging.exception("Error in /generate-recipes")
        raise _error(500, "Internal server error", str(e))

    logging.info(
        "[PIPELINE] /generate-recipes completed in %sms, recipes=%s",
        round((time.time() - total_start) * 1000, 2),
        len(recipes),
    )
    return {"recipes": recipes, "success": True}
