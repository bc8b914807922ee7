"""Queue declarations read from the topology configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from rabbitmq_topology.exceptions import TopologyConfigError


@dataclass(frozen=True)
class QueueDeclaration:
    """Declares a queue and the exchanges it binds to.

    ``routing_key`` applies to direct, topic and custom exchanges. ``headers`` and
    ``match_all`` apply to headers exchanges only: every header must match when
    ``match_all`` is true, any single one otherwise.
    """

    name: str
    exchange_names: Tuple[str, ...] = ()
    routing_key: str = ""
    durable: bool = True
    exclusive: bool = False
    auto_delete: bool = False
    match_all: bool = True
    args: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise TopologyConfigError("Queue declaration requires a non-empty name.")
        if isinstance(self.exchange_names, str):
            raise TopologyConfigError(
                f"Queue '{self.name}' expects a sequence of exchange names, not a string."
            )
        object.__setattr__(self, "exchange_names", tuple(self.exchange_names))
