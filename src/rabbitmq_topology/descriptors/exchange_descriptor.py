"""Broker exchange produced from an exchange declaration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from rabbitmq_topology.config import ExchangeType


@dataclass(frozen=True)
class ExchangeDescriptor:
    """Exchange ready to be declared on the broker.

    ``wire_type`` is the type string sent in ``exchange.declare``: one of the
    standard AMQP kinds, or the declared custom type.
    """

    name: str
    exchange_type: ExchangeType
    wire_type: str
    durable: bool = True
    auto_delete: bool = False
    arguments: Dict[str, Any] = field(default_factory=dict)
