from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .type import AssetSummary, CulturalAnalysis, ThemeExpansion


@runtime_checkable
class IThemeExpansion(Protocol):
    """LLM-backed theme expansion, cultural analysis and summarisation."""

    @property
    def is_configured(self) -> bool: ...

    async def expand_theme(
        self,
        theme: str,
        use_cache: bool = True,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> ThemeExpansion: ...

    async def generate_cultural_analysis(
        self, keywords: List[str], context: str = ""
    ) -> CulturalAnalysis: ...

    async def summarize_asset_opportunities(
        self, assets: List[Dict[str, Any]], theme: str
    ) -> AssetSummary: ...


__all__ = ["IThemeExpansion"]
