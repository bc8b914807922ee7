"""Contract interfaces for topology provisioning."""

from .registrar_interface import IRegistrar
from .topology_declarer_interface import ITopologyDeclarer

__all__ = [
    "IRegistrar",
    "ITopologyDeclarer",
]
