"""Theme expansion request schemas."""

from typing import List, Optional

from pydantic import Field

from models.schemas.base import CamelModel


class ExpandOptions(CamelModel):
    use_cache: bool = True
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0, le=2)


class ExpandRequest(CamelModel):
    """Body of POST /api/expand."""
    theme: str = Field(min_length=1, max_length=500, description="Cultural theme/vibe to expand")
    options: ExpandOptions = Field(default_factory=ExpandOptions)


class CulturalAnalysisRequest(CamelModel):
    """Body of POST /api/expand/cultural-analysis."""
    keywords: List[str] = Field(min_length=1, max_length=20)
    context: str = ""
