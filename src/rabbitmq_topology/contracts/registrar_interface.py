"""Defines the contract for the named registry of topology objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Type, TypeVar

from rabbitmq_topology.descriptors import (
    BindingDescriptor,
    ExchangeDescriptor,
    QueueDescriptor,
    TopologyDescriptor,
)

DescriptorT = TypeVar("DescriptorT", ExchangeDescriptor, QueueDescriptor, BindingDescriptor)


class IRegistrar(ABC):
    """Keeps created exchanges, queues and bindings retrievable by name and kind."""

    @abstractmethod
    def register(self, name: str, descriptor: TopologyDescriptor) -> bool:
        """Store ``descriptor`` under ``name``.

        Returns False when an equal descriptor is already registered under that
        name, True otherwise.
        """

    @abstractmethod
    def lookup(self, name: str, expected_type: Type[DescriptorT]) -> Optional[DescriptorT]:
        """Return the descriptor of kind ``expected_type`` registered as ``name``."""

    @abstractmethod
    def exchanges(self) -> List[ExchangeDescriptor]:
        """Registered exchanges in registration order."""

    @abstractmethod
    def queues(self) -> List[QueueDescriptor]:
        """Registered queues in registration order."""

    @abstractmethod
    def bindings(self) -> List[BindingDescriptor]:
        """Registered bindings in registration order."""
