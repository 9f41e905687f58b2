# Caller-facing risk tolerances
TOLERANCE_CONSERVATIVE = "conservative"
TOLERANCE_MODERATE = "moderate"
TOLERANCE_AGGRESSIVE = "aggressive"
TOLERANCES = (TOLERANCE_CONSERVATIVE, TOLERANCE_MODERATE, TOLERANCE_AGGRESSIVE)
DEFAULT_TOLERANCE = TOLERANCE_MODERATE

# Caller-facing horizons
HORIZONS = ("1m", "3m", "6m", "1y", "2y")
DEFAULT_HORIZON = "6m"
HORIZON_ONE_YEAR = "1y"
MONTH_SUFFIX = "m"

DEFAULT_VIBE = "trend"
DEFAULT_SIMULATION_MAX_ASSETS = 10
MAX_SIMULATION_ASSETS = 20
MAX_PORTFOLIO_SIZE = 1_000_000
REBALANCE_FREQUENCIES = ("never", "monthly", "quarterly")
DEFAULT_REBALANCE_FREQUENCY = "quarterly"

# Mapping onto pipeline options
PIPELINE_RISK_TOLERANCE = {
    TOLERANCE_CONSERVATIVE: "low",
    TOLERANCE_MODERATE: "medium",
    TOLERANCE_AGGRESSIVE: "high",
}
PIPELINE_MIN_CONFIDENCE = {
    TOLERANCE_CONSERVATIVE: 0.6,
    TOLERANCE_MODERATE: 0.4,
    TOLERANCE_AGGRESSIVE: 0.2,
}

# Portfolio construction
CANDIDATE_CAP = {TOLERANCE_CONSERVATIVE: 5, TOLERANCE_MODERATE: 8, TOLERANCE_AGGRESSIVE: 10}
ALLOCATION_CAP = {TOLERANCE_CONSERVATIVE: 20.0, TOLERANCE_MODERATE: 30.0, TOLERANCE_AGGRESSIVE: 40.0}
RISK_MULTIPLIER = {TOLERANCE_CONSERVATIVE: 0.7, TOLERANCE_MODERATE: 1.0, TOLERANCE_AGGRESSIVE: 1.5}
CONSERVATIVE_RISK_LEVELS = ("low", "medium")
EXCLUDED_MODERATE_RISK_LEVEL = "extreme"
RISK_LEVEL_VALUES = {"low": 25, "medium": 50, "high": 75}
UNKNOWN_RISK_VALUE = 100
TOTAL_ALLOCATION = 100.0
DIVERSIFICATION_PER_ASSET = 10
MAX_DIVERSIFICATION = 100

# Projections
MONTHS_TIME_MULTIPLIER = 0.5
ONE_YEAR_TIME_MULTIPLIER = 1.0
LONG_TIME_MULTIPLIER = 1.5
BASE_RETURN = 15.0
RETURN_RISK_PREMIUM = 0.3
BASE_VOLATILITY = 20.0
VOLATILITY_RISK_FACTOR = 0.4
DRAWDOWN_FACTOR = 0.8
VAR_95_FACTOR = 0.05
CORRELATION_MIN = 0.2
CORRELATION_SPAN = 0.6
DEFAULT_LIQUIDITY = 50
SECTOR_TOKEN = "DeFi"
SECTOR_NFT = "NFT"
ASSET_TYPE_TOKEN = "token"
ASSET_TYPE_NFT = "nft_collection"
ASSET_TYPES = (ASSET_TYPE_TOKEN, ASSET_TYPE_NFT)

# Recommendations
CONCENTRATION_THRESHOLD = 35
MIN_CONSERVATIVE_ASSETS = 5
HIGH_RISK_THRESHOLD = 70
LOW_DIVERSIFICATION_THRESHOLD = 50
HIGH_MOMENTUM_THRESHOLD = 60
HIGH_MOMENTUM_LISTED = 3

REBALANCE_CONCENTRATION = "Consider reducing concentration in high-allocation assets"
REBALANCE_DIVERSIFY = "Increase diversification by adding more assets"
REBALANCE_SCHEDULE = "Review allocations monthly and rebalance quarterly"
MITIGATION_HIGH_RISK = (
    "Portfolio has high risk - consider adding stable assets",
    "Set stop-loss orders at 15-20% below entry prices",
)
MITIGATION_DIVERSIFY = "Improve diversification across different asset types and sectors"
MITIGATION_ALWAYS = (
    "Monitor market correlation during volatile periods",
    "Consider hedging strategies during uncertain market conditions",
)
OPPORTUNITY_SHORT = "Focus on assets with strong social media momentum for short-term gains"
OPPORTUNITY_LONG = "Look for undervalued assets with strong cultural narratives for long-term growth"
OPPORTUNITY_ALWAYS = "Watch for new cultural trends that could drive future opportunities"

# Backtest
MIN_BACKTEST_ASSETS = 1
MAX_BACKTEST_ASSETS = 10
MAX_INITIAL_VALUE = 1_000_000
DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
DAILY_RETURN_BIAS = 0.45
DAILY_RETURN_SCALE = 0.05
TRADING_DAYS_PER_YEAR = 252
DAYS_PER_YEAR = 365
ASSET_RETURN_MIN = -20.0
ASSET_RETURN_SPAN = 60.0

__all__ = [
    "TOLERANCE_CONSERVATIVE",
    "TOLERANCE_MODERATE",
    "TOLERANCE_AGGRESSIVE",
    "TOLERANCES",
    "DEFAULT_TOLERANCE",
    "HORIZONS",
    "DEFAULT_HORIZON",
    "HORIZON_ONE_YEAR",
    "MONTH_SUFFIX",
    "DEFAULT_VIBE",
    "DEFAULT_SIMULATION_MAX_ASSETS",
    "MAX_SIMULATION_ASSETS",
    "MAX_PORTFOLIO_SIZE",
    "REBALANCE_FREQUENCIES",
    "DEFAULT_REBALANCE_FREQUENCY",
    "PIPELINE_RISK_TOLERANCE",
    "PIPELINE_MIN_CONFIDENCE",
    "CANDIDATE_CAP",
    "ALLOCATION_CAP",
    "RISK_MULTIPLIER",
    "CONSERVATIVE_RISK_LEVELS",
    "EXCLUDED_MODERATE_RISK_LEVEL",
    "RISK_LEVEL_VALUES",
    "UNKNOWN_RISK_VALUE",
    "TOTAL_ALLOCATION",
    "DIVERSIFICATION_PER_ASSET",
    "MAX_DIVERSIFICATION",
    "MONTHS_TIME_MULTIPLIER",
    "ONE_YEAR_TIME_MULTIPLIER",
    "LONG_TIME_MULTIPLIER",
    "BASE_RETURN",
    "RETURN_RISK_PREMIUM",
    "BASE_VOLATILITY",
    "VOLATILITY_RISK_FACTOR",
    "DRAWDOWN_FACTOR",
    "VAR_95_FACTOR",
    "CORRELATION_MIN",
    "CORRELATION_SPAN",
    "DEFAULT_LIQUIDITY",
    "SECTOR_TOKEN",
    "SECTOR_NFT",
    "ASSET_TYPE_TOKEN",
    "ASSET_TYPE_NFT",
    "ASSET_TYPES",
    "CONCENTRATION_THRESHOLD",
    "MIN_CONSERVATIVE_ASSETS",
    "HIGH_RISK_THRESHOLD",
    "LOW_DIVERSIFICATION_THRESHOLD",
    "HIGH_MOMENTUM_THRESHOLD",
    "HIGH_MOMENTUM_LISTED",
    "REBALANCE_CONCENTRATION",
    "REBALANCE_DIVERSIFY",
    "REBALANCE_SCHEDULE",
    "MITIGATION_HIGH_RISK",
    "MITIGATION_DIVERSIFY",
    "MITIGATION_ALWAYS",
    "OPPORTUNITY_SHORT",
    "OPPORTUNITY_LONG",
    "OPPORTUNITY_ALWAYS",
    "MIN_BACKTEST_ASSETS",
    "MAX_BACKTEST_ASSETS",
    "MAX_INITIAL_VALUE",
    "DATE_FORMAT",
    "DATE_PATTERN",
    "DAILY_RETURN_BIAS",
    "DAILY_RETURN_SCALE",
    "TRADING_DAYS_PER_YEAR",
    "DAYS_PER_YEAR",
    "ASSET_RETURN_MIN",
    "ASSET_RETURN_SPAN",
]
