from .new import New
from .orchestrator import OrchestratorUseCase

__all__ = ["New", "OrchestratorUseCase"]
