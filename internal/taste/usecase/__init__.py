from .new import New
from .taste import TasteUseCase

__all__ = ["New", "TasteUseCase"]
