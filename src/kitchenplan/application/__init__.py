"""Application layer - session configuration and use cases."""

from .commands import AssembleCabinetCommand, PlaceCabinetCommand
from .dtos import AssemblyOutput, PlacementOutput
from .factory import ServiceFactory
from .session import SessionConfig

__all__ = [
    "AssembleCabinetCommand",
    "AssemblyOutput",
    "PlaceCabinetCommand",
    "PlacementOutput",
    "ServiceFactory",
    "SessionConfig",
]
