"""Constants for theme expansion."""

# Sentiment labels
SENTIMENT_POSITIVE = "positive"
SENTIMENT_NEGATIVE = "negative"
SENTIMENT_NEUTRAL = "neutral"
VALID_SENTIMENTS = (SENTIMENT_POSITIVE, SENTIMENT_NEGATIVE, SENTIMENT_NEUTRAL)

# Parsed-response defaults
DEFAULT_CONFIDENCE = 0.5
DEFAULT_TIMEFRAME = "unknown"
DEFAULT_CATEGORY = "general"

# Degraded expansion when the model returns something that is not JSON
FALLBACK_CONFIDENCE = 0.3
FALLBACK_DESCRIPTION = "AI analysis failed - using fallback"

# Cultural analysis parse fallback
FALLBACK_ANALYSIS_TEXT = "Analysis failed - could not parse response"
FALLBACK_ANALYSIS_SCORE = 50
FALLBACK_ANALYSIS_RISK = "Analysis error"

# Asset summary parse fallback
FALLBACK_SUMMARY = "Summary generation failed"
FALLBACK_MARKET_TIMING = "Unknown"
FALLBACK_RISK_ASSESSMENT = "Analysis error occurred"

# Token budgets per call type
CULTURAL_ANALYSIS_MAX_TOKENS = 2000
ASSET_SUMMARY_MAX_TOKENS = 1500

SERVICE_NAME = "GPTService"

THEME_EXPANSION_PROMPT = """
You are a cultural trend analyst specializing in web3 and digital culture. Analyze the following cultural theme/vibe and provide a comprehensive expansion.

Theme: "{theme}"

Please provide a JSON response with the following structure:
{{
  "expandedKeywords": ["array", "of", "related", "keywords"],
  "categories": ["cultural", "categories"],
  "culturalContext": {{
    "description": "detailed description of the cultural phenomenon",
    "demographics": ["target", "demographics"],
    "platforms": ["social", "platforms", "where", "this", "trends"],
    "timeframe": "estimated timeframe for this trend"
  }},
  "relatedTrends": ["related", "cultural", "trends"],
  "sentiment": "positive|negative|neutral",
  "confidence": 0.85
}}

Focus on:
- Web3/crypto/NFT relevance
- Social media presence
- Cultural significance
- Demographic appeal
- Market timing

Respond with valid JSON only.
""".strip()

CULTURAL_ANALYSIS_PROMPT = """
Analyze the cultural significance and trend potential of these elements:

Keywords: {keywords}
Context: {context}

Provide analysis covering:
1. Cultural significance (0-100 score)
2. Trend potential (0-100 score)
3. Risk factors
4. Market opportunities

Respond with JSON:
{{
  "analysis": "detailed cultural analysis",
  "culturalSignificance": 85,
  "trendPotential": 70,
  "riskFactors": ["risk1", "risk2"],
  "opportunities": ["opportunity1", "opportunity2"]
}}
""".strip()

ASSET_SUMMARY_PROMPT = """
Analyze these crypto/NFT assets in relation to the cultural theme "{theme}":

Assets: {assets}

Provide:
1. Executive summary
2. Top 3 opportunities with reasoning and scores (0-100)
3. Market timing assessment
4. Risk assessment

Respond with JSON:
{{
  "summary": "executive summary",
  "topOpportunities": [
    {{"asset": "name", "reasoning": "why", "score": 85}}
  ],
  "marketTiming": "timing assessment",
  "riskAssessment": "risk analysis"
}}
""".strip()

__all__ = [
    "SENTIMENT_POSITIVE",
    "SENTIMENT_NEGATIVE",
    "SENTIMENT_NEUTRAL",
    "VALID_SENTIMENTS",
    "DEFAULT_CONFIDENCE",
    "DEFAULT_TIMEFRAME",
    "DEFAULT_CATEGORY",
    "FALLBACK_CONFIDENCE",
    "FALLBACK_DESCRIPTION",
    "FALLBACK_ANALYSIS_TEXT",
    "FALLBACK_ANALYSIS_SCORE",
    "FALLBACK_ANALYSIS_RISK",
    "FALLBACK_SUMMARY",
    "FALLBACK_MARKET_TIMING",
    "FALLBACK_RISK_ASSESSMENT",
    "CULTURAL_ANALYSIS_MAX_TOKENS",
    "ASSET_SUMMARY_MAX_TOKENS",
    "SERVICE_NAME",
    "THEME_EXPANSION_PROMPT",
    "CULTURAL_ANALYSIS_PROMPT",
    "ASSET_SUMMARY_PROMPT",
]
