"""Application layer - use cases and orchestration."""

from .commands import BuildProductionLayoutCommand
from .dtos import ProductionLayoutOutput

__all__ = [
    "BuildProductionLayoutCommand",
    "ProductionLayoutOutput",
]
