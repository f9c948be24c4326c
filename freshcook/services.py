"""Image analysis and recipe generation services."""

import logging
import time
from typing import Any, Dict, List, Optional

import openai

from freshcook.config import RECIPE_MODEL
from freshcook.ingredients import extract_ingredients_from_response, parse_analysis_response
from freshcook.openai_client import get_openai_client
from freshcook.prompts import RECIPE_PROMPT
from freshcook.utils import extract_json_array
from freshcook.vision_client import annotate_image

logger = logging.getLogger(__name__)

DIFFICULTIES = ("Easy", "Medium", "Hard")
DEFAULT_COOKING_TIME = 30
DEFAULT_SERVINGS = 4

# Upstream status -> (error, details) shown to the user
_STATUS_MESSAGES = {
    401: (
        "OpenRouter API authentication failed",
        "The API key is invalid or expired. Please check your OpenRouter account.",
    ),
    402: (
        "OpenRouter API payment required",
        "Insufficient credits in your OpenRouter account.",
    ),
    429: (
        "OpenRouter API rate limit exceeded",
        "Too many requests. Please try again later.",
    ),
}


class RecipeGenerationError(RuntimeError):
    """Recipe model call failed; `status` is the HTTP status to report."""

    def __init__(self, message: str, details: Optional[str] = None, status: int = 500):
        super().__init__(message)
        self.message = message
        self.details = details
        self.status = status


def _client():
    return get_openai_client()


def analyze_image(image_b64: str) -> List[str]:
    """Annotate an image with Vision and extract its ingredient list."""
    raw_response = annotate_image(image_b64)
    response = parse_analysis_response(raw_response)
    ingredients = extract_ingredients_from_response(response)
    logger.info(
        "Extracted %s unique ingredients: %s", len(ingredients), ingredients
    )
    return ingredients


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_recipe(recipe: Any, index: int, batch_ms: int) -> Dict[str, Any]:
    """Fill missing or mistyped recipe fields with defaults."""
    if not isinstance(recipe, dict):
        recipe = {}

    ingredients = recipe.get("ingredients")
    instructions = recipe.get("instructions")
    cooking_time = recipe.get("cooking_time")
    servings = recipe.get("servings")
    difficulty = recipe.get("difficulty")

    return {
        "id": f"recipe-{batch_ms}-{index}",
        "title": recipe.get("title") or "Untitled Recipe",
        "description": recipe.get("description") or "A delicious recipe",
        "ingredients": ingredients if isinstance(ingredients, list) else [],
        "instructions": instructions if isinstance(instructions, list) else [],
        "cookingTime": cooking_time if _is_number(cooking_time) else DEFAULT_COOKING_TIME,
        "servings": servings if _is_number(servings) else DEFAULT_SERVINGS,
        "difficulty": difficulty if difficulty in DIFFICULTIES else "Medium",
    }


def generate_recipes(ingredients: List[str]) -> List[Dict[str, Any]]:
    """Ask the recipe model for three recipes built from the given ingredients."""
    if not ingredients:
        raise ValueError("No ingredients provided")

    prompt = RECIPE_PROMPT.format(ingredients=", ".join(ingredients))
    logger.info(
        "Requesting recipes: model=%s, ingredients=%s", RECIPE_MODEL, len(ingredients)
    )

    try:
        response = _client().chat.completions.create(
            model=RECIPE_MODEL,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.7,
            max_tokens=2000,
        )
    except openai.APIStatusError as e:
        logger.error("OpenRouter API error: status=%s, body=%s", e.status_code, e.body)
        message, details = _STATUS_MESSAGES.get(
            e.status_code,
            (
                "Failed to generate recipes",
                f"OpenRouter API returned {e.status_code}",
            ),
        )
        raise RecipeGenerationError(message, details, e.status_code) from e
    except openai.APIConnectionError as e:
        logger.error("Network error calling OpenRouter API: %s", e)
        raise RecipeGenerationError("Failed to generate recipes", str(e)) from e

    if not response.choices or response.choices[0].message is None:
        logger.error("Invalid response from OpenRouter: %s", response)
        raise RecipeGenerationError("Invalid response from AI service")

    content = response.choices[0].message.content or ""
    logger.info("Recipe response received, length: %s", len(content))

    try:
        recipes = extract_json_array(content)
    except ValueError as e:
        logger.error("Failed to parse AI response: %s", e)
        raise RecipeGenerationError("Failed to parse recipe data", str(e)) from e

    if not isinstance(recipes, list):
        raise RecipeGenerationError("Invalid recipe format - expected array")

    batch_ms = int(time.time() * 1000)
    validated = [validate_recipe(recipe, index, batch_ms) for index, recipe in enumerate(recipes)]
    logger.info("Successfully generated %s recipes", len(validated))
    return validated
