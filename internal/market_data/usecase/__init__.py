from .new import New
from .market_data import MarketDataUseCase

__all__ = ["New", "MarketDataUseCase"]
