from .new import New
from .simulator import Simulator

__all__ = ["New", "Simulator"]
