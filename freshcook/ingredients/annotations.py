"""Shapes of the image-understanding response consumed by the pipeline."""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class LabelAnnotation(BaseModel):
    description: str
    score: float


class TextAnnotation(BaseModel):
    description: str


class AnalysisResponse(BaseModel):
    """
    One entry of a Vision `images:annotate` response.

    Both annotation lists are optional upstream; absent lists become empty.
    Unknown fields (mid, topicality, boundingPoly, ...) are ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    label_annotations: List[LabelAnnotation] = Field(
        default_factory=list, alias="labelAnnotations"
    )
    text_annotations: List[TextAnnotation] = Field(
        default_factory=list, alias="textAnnotations"
    )

    @property
    def full_text(self) -> Optional[str]:
        """Full OCR block (the first text annotation), if any."""
        if not self.text_annotations:
            return None
        return self.text_annotations[0].description


def parse_analysis_response(payload: Any) -> AnalysisResponse:
    """
    Validate a raw image-service response.

    A malformed payload degrades to an empty response instead of raising, so
    the caller ends up with an empty ingredient list.
    """
    if not isinstance(payload, dict):
        logger.warning(
            "Analysis response is not an object (got %s), treating as empty",
            type(payload).__name__,
        )
        return AnalysisResponse()

    # Explicit nulls behave like missing lists
    cleaned = {key: value for key, value in payload.items() if value is not None}
    try:
        return AnalysisResponse.model_validate(cleaned)
    except ValidationError as e:
        logger.warning(
            "Malformed analysis response, treating as empty: %s error(s), first=%s",
            e.error_count(),
            e.errors()[0].get("msg") if e.errors() else None,
        )
        return AnalysisResponse()
