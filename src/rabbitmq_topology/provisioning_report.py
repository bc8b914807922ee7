"""Outcome of a provisioning run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .descriptors import BindingDescriptor, ExchangeDescriptor, QueueDescriptor


@dataclass(frozen=True)
class SkippedExchange:
    """An exchange declaration that produced no descriptor."""

    name: str
    reason: str


@dataclass(frozen=True)
class SkippedBinding:
    """A (queue, exchange) reference that produced no binding."""

    queue: str
    exchange: str
    reason: str


@dataclass(frozen=True)
class ProvisioningReport:
    exchanges: Tuple[ExchangeDescriptor, ...] = ()
    queues: Tuple[QueueDescriptor, ...] = ()
    bindings: Tuple[BindingDescriptor, ...] = ()
    skipped_exchanges: Tuple[SkippedExchange, ...] = ()
    skipped_bindings: Tuple[SkippedBinding, ...] = ()

    @property
    def warning_count(self) -> int:
        return len(self.skipped_exchanges) + len(self.skipped_bindings)
