from .new import New
from .theme_expansion import ThemeExpansionUseCase

__all__ = ["New", "ThemeExpansionUseCase"]
