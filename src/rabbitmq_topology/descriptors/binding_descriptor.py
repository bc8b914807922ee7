"""Binding between one queue and one exchange."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from rabbitmq_topology.config import ExchangeType

HEADERS_MATCH_ARGUMENT = "x-match"


class HeadersMatchMode(str, Enum):
    """Whether a headers binding needs every header to match or just one."""

    ALL = "all"
    ANY = "any"


def binding_key(queue_name: str, exchange_name: str) -> str:
    """Registry name of the binding between ``queue_name`` and ``exchange_name``."""
    return f"{queue_name}-{exchange_name}"


@dataclass(frozen=True)
class BindingDescriptor:
    """Binds ``queue`` to ``exchange`` with a matching rule.

    Direct, topic and custom bindings carry a ``routing_key``. Headers bindings
    carry ``headers`` and a ``match_mode``. Fanout bindings carry neither.
    """

    queue: str
    exchange: str
    exchange_type: ExchangeType
    routing_key: Optional[str] = None
    headers: Dict[str, Any] = field(default_factory=dict)
    match_mode: Optional[HeadersMatchMode] = None

    @property
    def key(self) -> str:
        return binding_key(self.queue, self.exchange)

    @property
    def arguments(self) -> Dict[str, Any]:
        """Arguments sent with ``queue.bind``."""
        if self.match_mode is None:
            return {}
        arguments = dict(self.headers)
        arguments[HEADERS_MATCH_ARGUMENT] = self.match_mode.value
        return arguments
