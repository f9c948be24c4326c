"""Merge label and OCR ingredient candidates into the final list."""

import logging
from typing import Iterable, List, Optional

from .annotations import AnalysisResponse, LabelAnnotation
from .classifier import is_food_related
from .miner import extract_ingredients_from_text
from .normalizer import normalize_ingredient

logger = logging.getLogger(__name__)

# Labels must score strictly above this to be considered
LABEL_SCORE_THRESHOLD = 0.5
# Entries of this length or shorter are dropped
MIN_INGREDIENT_LENGTH = 2
MAX_INGREDIENTS = 15


def extract_ingredients(
    labels: Iterable[LabelAnnotation],
    raw_text: Optional[str] = None,
) -> List[str]:
    """
    Build the ingredient list from image labels and optional OCR text.

    Order: food labels as returned upstream, then dictionary terms mined from
    the text (dictionary order). Duplicates are removed by exact normalized
    value, short entries dropped and the result capped at MAX_INGREDIENTS.
    """
    candidates = [
        normalize_ingredient(label.description)
        for label in labels
        if label.score > LABEL_SCORE_THRESHOLD and is_food_related(label.description)
    ]
    from_labels = len(candidates)

    if raw_text is not None:
        mined = extract_ingredients_from_text(raw_text.lower())
        candidates.extend(normalize_ingredient(term) for term in mined)

    unique = list(dict.fromkeys(candidates))
    result = [name for name in unique if len(name) > MIN_INGREDIENT_LENGTH]
    result = result[:MAX_INGREDIENTS]

    logger.debug(
        "Ingredient candidates: labels=%s, text=%s, unique=%s, returned=%s",
        from_labels,
        len(candidates) - from_labels,
        len(unique),
        len(result),
    )
    return result


def extract_ingredients_from_response(response: AnalysisResponse) -> List[str]:
    """Run the pipeline over a validated image-service response."""
    return extract_ingredients(response.label_annotations, response.full_text)
