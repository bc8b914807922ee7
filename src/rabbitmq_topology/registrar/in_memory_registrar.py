"""In-process registry of topology descriptors."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type

from rabbitmq_topology.contracts import IRegistrar
from rabbitmq_topology.contracts.registrar_interface import DescriptorT
from rabbitmq_topology.descriptors import (
    BindingDescriptor,
    ExchangeDescriptor,
    QueueDescriptor,
    TopologyDescriptor,
)


class InMemoryRegistrar(IRegistrar):
    """Registry with one namespace per descriptor kind.

    An exchange and a queue may therefore share a name, as they can on the broker.
    """

    def __init__(self) -> None:
        self._exchanges: Dict[str, ExchangeDescriptor] = {}
        self._queues: Dict[str, QueueDescriptor] = {}
        self._bindings: Dict[str, BindingDescriptor] = {}
        self._namespaces: Dict[type, Dict[str, Any]] = {
            ExchangeDescriptor: self._exchanges,
            QueueDescriptor: self._queues,
            BindingDescriptor: self._bindings,
        }
        self.logger = logging.getLogger(__name__)

    def register(self, name: str, descriptor: TopologyDescriptor) -> bool:
        kind = type(descriptor)
        namespace = self._namespaces.get(kind)
        if namespace is None:
            raise TypeError(f"Cannot register object of type {kind.__name__}.")

        existing = namespace.get(name)
        if existing == descriptor:
            self.logger.debug("%s [%s] already registered.", kind.__name__, name)
            return False

        if existing is not None:
            self.logger.warning("Replacing registered %s [%s].", kind.__name__, name)

        namespace[name] = descriptor
        self.logger.debug("Registered %s [%s].", kind.__name__, name)
        return True

    def lookup(self, name: str, expected_type: Type[DescriptorT]) -> Optional[DescriptorT]:
        descriptor = self._namespaces.get(expected_type, {}).get(name)
        if isinstance(descriptor, expected_type):
            return descriptor
        return None

    def exchanges(self) -> List[ExchangeDescriptor]:
        return list(self._exchanges.values())

    def queues(self) -> List[QueueDescriptor]:
        return list(self._queues.values())

    def bindings(self) -> List[BindingDescriptor]:
        return list(self._bindings.values())
