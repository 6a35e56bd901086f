"""Recommendation & explanation routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_catalog, get_explainer
from app.api.schemas import (
    ExplainRequest,
    ExplanationResponse,
    RecommendationItem,
    RecommendationsRequest,
)
from app.config import settings
from app.domain.errors import EmptyHistoryError, UnknownItemError
from app.ports.catalog import CatalogPort
from app.services.explainer import ExplainerService
from app.services.scorer import score

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Recommendations"])


@router.post("/recommendations", response_model=list[RecommendationItem])
async def get_recommendations(
    data: RecommendationsRequest,
    catalog: CatalogPort = Depends(get_catalog),
) -> list[RecommendationItem]:
    """Rank unviewed products by tag and category overlap with the history."""
    try:
        ranked = score(
            catalog.list_items(),
            data.user_history,
            limit=settings.max_recommendations,
        )
    except EmptyHistoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except UnknownItemError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return [RecommendationItem.from_candidate(c) for c in ranked]


@router.post("/explain", response_model=ExplanationResponse)
async def explain_recommendation(
    data: ExplainRequest,
    catalog: CatalogPort = Depends(get_catalog),
    explainer: ExplainerService = Depends(get_explainer),
) -> ExplanationResponse:
    """
    Get a natural-language justification for a recommended product.

    Generation failures degrade to a fallback explanation; only unknown
    product ids are rejected.
    """
    try:
        history = catalog.resolve(data.user_history)
        target = catalog.get(data.recommended_product_id)
    except UnknownItemError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    if target.id in data.user_history:
        logger.warning("Explaining product %d which is already in the history", target.id)

    result = await explainer.explain(history, target)
    return ExplanationResponse(explanation=result.text, was_generated=result.was_generated)
