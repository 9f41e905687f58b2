"""Taste correlation request schemas."""

from typing import List, Literal

from pydantic import Field

from internal.taste.type import Demographics, TasteProfile
from models.schemas.base import CamelModel

Platform = Literal["twitter", "instagram", "tiktok"]


class TasteOptions(CamelModel):
    use_cache: bool = True
    limit: int = Field(default=20, gt=0, le=50)


class TasteRequest(CamelModel):
    """Body of POST /api/taste."""
    cultural_theme: str = Field(min_length=1, max_length=200)
    keywords: List[str] = Field(min_length=1, max_length=50)
    categories: List[str] = Field(default_factory=list)
    options: TasteOptions = Field(default_factory=TasteOptions)


class DemographicsModel(CamelModel):
    age_range: str
    interests: List[str]
    behaviors: List[str]


class TasteProfileModel(CamelModel):
    keywords: List[str]
    categories: List[str]
    demographics: DemographicsModel
    cultural_affinities: List[str]
    brand_affinities: List[str]
    content_preferences: List[str]

    def to_profile(self) -> TasteProfile:
        return TasteProfile(
            keywords=list(self.keywords),
            categories=list(self.categories),
            demographics=Demographics(
                age_range=self.demographics.age_range,
                interests=list(self.demographics.interests),
                behaviors=list(self.demographics.behaviors),
            ),
            cultural_affinities=list(self.cultural_affinities),
            brand_affinities=list(self.brand_affinities),
            content_preferences=list(self.content_preferences),
        )


class InfluencersRequest(CamelModel):
    """Body of POST /api/taste/influencers."""
    taste_profile: TasteProfileModel
    platforms: List[Platform] = Field(default_factory=lambda: ["twitter", "instagram", "tiktok"])


class BrandsRequest(CamelModel):
    """Body of POST /api/taste/brands."""
    taste_profile: TasteProfileModel
    sectors: List[str] = Field(default_factory=lambda: ["technology", "fashion", "entertainment"])
