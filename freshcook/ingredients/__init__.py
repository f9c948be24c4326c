"""
Ingredient extraction package:
- lexicon: built-in food vocabularies
- classifier: food-relatedness test for image labels
- miner: dictionary matching over OCR text
- normalizer: canonical display form for ingredient names
- annotations: image-service response shapes
- aggregator: merge, dedupe and bound the final list
"""

from .aggregator import extract_ingredients, extract_ingredients_from_response
from .annotations import AnalysisResponse, LabelAnnotation, TextAnnotation, parse_analysis_response
from .classifier import is_food_related
from .miner import extract_ingredients_from_text
from .normalizer import normalize_ingredient

__all__ = [
    "AnalysisResponse",
    "LabelAnnotation",
    "TextAnnotation",
    "extract_ingredients",
    "extract_ingredients_from_response",
    "extract_ingredients_from_text",
    "is_food_related",
    "normalize_ingredient",
    "parse_analysis_response",
]
