from .new import New
from .marketplace import MarketplaceUseCase

__all__ = ["New", "MarketplaceUseCase"]
