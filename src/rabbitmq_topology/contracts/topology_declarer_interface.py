"""Defines the contract for declaring a registered topology on a broker."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .registrar_interface import IRegistrar


class ITopologyDeclarer(ABC):
    """Declares every registered exchange, queue and binding against the broker."""

    @abstractmethod
    def declare(self, registrar: IRegistrar) -> None:
        """Declare exchanges first, then queues, then bindings."""
