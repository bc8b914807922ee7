"""Creates exchange descriptors from exchange declarations."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from pika.exchange_type import ExchangeType as PikaExchangeType

from rabbitmq_topology.config import ExchangeDeclaration, ExchangeType
from rabbitmq_topology.contracts import IRegistrar
from rabbitmq_topology.descriptors import ExchangeDescriptor
from rabbitmq_topology.provisioning_report import SkippedExchange

STANDARD_WIRE_TYPES: Dict[str, str] = {
    ExchangeType.DIRECT: PikaExchangeType.direct.value,
    ExchangeType.TOPIC: PikaExchangeType.topic.value,
    ExchangeType.HEADERS: PikaExchangeType.headers.value,
    ExchangeType.FANOUT: PikaExchangeType.fanout.value,
}


class ExchangeFactory:
    """Builds one exchange descriptor per declaration.

    Standard exchanges keep the client defaults (durable, not auto-deleted, no
    arguments). Custom exchanges are always durable and never auto-deleted and
    receive the declared arguments unchanged.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.skipped: List[SkippedExchange] = []

    def create(self, declaration: ExchangeDeclaration) -> Optional[ExchangeDescriptor]:
        if declaration.type is ExchangeType.CUSTOM and declaration.custom_type:
            return ExchangeDescriptor(
                name=declaration.name,
                exchange_type=ExchangeType.CUSTOM,
                wire_type=declaration.custom_type,
                durable=True,
                auto_delete=False,
                arguments=dict(declaration.arguments),
            )

        wire_type = STANDARD_WIRE_TYPES.get(declaration.type)
        if wire_type is None:
            reason = f"unrecognized exchange type {declaration.type!r}"
            self.logger.warning("Exchange [%s] skipped: %s", declaration.name, reason)
            self.skipped.append(SkippedExchange(name=declaration.name, reason=reason))
            return None

        return ExchangeDescriptor(
            name=declaration.name,
            exchange_type=ExchangeType(declaration.type),
            wire_type=wire_type,
        )

    def create_all(
        self,
        declarations: Iterable[ExchangeDeclaration],
        registrar: IRegistrar,
    ) -> List[ExchangeDescriptor]:
        """Create and register an exchange for each declaration, in order."""
        self.skipped = []
        created = []
        for declaration in declarations:
            descriptor = self.create(declaration)
            if descriptor is None:
                continue
            registrar.register(descriptor.name, descriptor)
            created.append(descriptor)

        self.logger.info("Created %d exchange(s).", len(created))
        return created
