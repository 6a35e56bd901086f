"""Pydantic request/response schemas for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.models import CatalogItem, ScoredCandidate


# ── Requests ───────────────────────────────────────

class RecommendationsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_history: list[int] = Field(alias="userHistory")


class ExplainRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_history: list[int] = Field(alias="userHistory")
    recommended_product_id: int = Field(alias="recommendedProductId")


# ── Responses ──────────────────────────────────────

class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    category: str
    tags: list[str]
    image: str

    @classmethod
    def from_item(cls, item: CatalogItem) -> "ProductResponse":
        return cls(
            id=item.id,
            name=item.name,
            price=item.price,
            category=item.category,
            tags=item.sorted_tags(),
            image=item.image,
        )


class RecommendationItem(ProductResponse):
    score: int

    @classmethod
    def from_candidate(cls, candidate: ScoredCandidate) -> "RecommendationItem":
        product = ProductResponse.from_item(candidate.item)
        return cls(**product.model_dump(), score=candidate.score)


class ExplanationResponse(BaseModel):
    explanation: str
    was_generated: bool
