"""Typed topology configuration model."""

from .exchange_declaration import ExchangeDeclaration, ExchangeType
from .queue_declaration import QueueDeclaration
from .topology_config import DuplicateNameMode, TopologyConfig

__all__ = [
    "DuplicateNameMode",
    "ExchangeDeclaration",
    "ExchangeType",
    "QueueDeclaration",
    "TopologyConfig",
]
