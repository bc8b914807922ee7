"""Exchange declarations read from the topology configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from rabbitmq_topology.exceptions import CustomExchangeTypeError, TopologyConfigError


class ExchangeType(str, Enum):
    """Kinds of exchange a declaration may ask for."""

    CUSTOM = "CUSTOM"
    DIRECT = "DIRECT"
    TOPIC = "TOPIC"
    HEADERS = "HEADERS"
    FANOUT = "FANOUT"


@dataclass(frozen=True)
class ExchangeDeclaration:
    """Declares a single exchange.

    ``type`` is normalized to an :class:`ExchangeType`, matching names case
    insensitively. A raw string is kept when the configured kind is not
    recognized so the exchange factory can report it.
    ``custom_type`` is the broker-side type of a ``CUSTOM`` exchange (for example
    ``x-delayed-message``) and ``arguments`` are passed to it verbatim.
    """

    name: str
    type: Union[ExchangeType, str]
    custom_type: Optional[str] = None
    arguments: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise TopologyConfigError("Exchange declaration requires a non-empty name.")

        if not isinstance(self.type, ExchangeType):
            normalized = str(self.type).strip().upper()
            if normalized in ExchangeType.__members__:
                object.__setattr__(self, "type", ExchangeType[normalized])

        if self.type is ExchangeType.CUSTOM and not self.custom_type:
            raise CustomExchangeTypeError(
                f"Custom exchange '{self.name}' must define a custom type."
            )
        if self.type is not ExchangeType.CUSTOM and self.custom_type:
            raise CustomExchangeTypeError(
                f"Exchange '{self.name}' of type {self.type} cannot define a custom type."
            )
