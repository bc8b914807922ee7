"""Resolves queue declarations into queue and binding descriptors."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from rabbitmq_topology.config import ExchangeType, QueueDeclaration, TopologyConfig
from rabbitmq_topology.contracts import IRegistrar
from rabbitmq_topology.descriptors import (
    BindingDescriptor,
    ExchangeDescriptor,
    HeadersMatchMode,
    QueueDescriptor,
)
from rabbitmq_topology.provisioning_report import SkippedBinding

BindingRule = Callable[[QueueDeclaration, ExchangeDescriptor], BindingDescriptor]


def _routing_key_binding(queue: QueueDeclaration, exchange: ExchangeDescriptor) -> BindingDescriptor:
    return BindingDescriptor(
        queue=queue.name,
        exchange=exchange.name,
        exchange_type=exchange.exchange_type,
        routing_key=queue.routing_key,
    )


def _headers_binding(queue: QueueDeclaration, exchange: ExchangeDescriptor) -> BindingDescriptor:
    return BindingDescriptor(
        queue=queue.name,
        exchange=exchange.name,
        exchange_type=exchange.exchange_type,
        headers=dict(queue.headers),
        match_mode=HeadersMatchMode.ALL if queue.match_all else HeadersMatchMode.ANY,
    )


def _fanout_binding(queue: QueueDeclaration, exchange: ExchangeDescriptor) -> BindingDescriptor:
    return BindingDescriptor(
        queue=queue.name,
        exchange=exchange.name,
        exchange_type=exchange.exchange_type,
    )


BINDING_RULES: Dict[str, BindingRule] = {
    ExchangeType.DIRECT: _routing_key_binding,
    ExchangeType.TOPIC: _routing_key_binding,
    ExchangeType.HEADERS: _headers_binding,
    ExchangeType.FANOUT: _fanout_binding,
    ExchangeType.CUSTOM: _routing_key_binding,
}


class BindingResolver:
    """Creates each configured queue and binds it to its exchanges.

    Exchanges must already be registered. A reference that cannot be bound is
    logged and recorded in ``skipped``; the remaining references of the same
    queue and all other queues are still processed.
    """

    def __init__(
        self,
        config: TopologyConfig,
        registrar: IRegistrar,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.registrar = registrar
        self.logger = logger or logging.getLogger(__name__)
        self.skipped: List[SkippedBinding] = []

    def resolve_all(self) -> List[BindingDescriptor]:
        self.skipped = []
        bindings: List[BindingDescriptor] = []
        queues = self.config.effective_queues()
        for queue in queues:
            bindings.extend(self.resolve_queue(queue))

        self.logger.info(
            "Resolved %d binding(s) for %d queue(s), %d skipped.",
            len(bindings),
            len(queues),
            len(self.skipped),
        )
        return bindings

    def resolve_queue(self, queue: QueueDeclaration) -> List[BindingDescriptor]:
        self.materialize_queue(queue)

        bindings = []
        for exchange_name in queue.exchange_names:
            binding = self._resolve_binding(queue, exchange_name)
            if binding is None:
                continue

            registered = self.registrar.lookup(binding.key, BindingDescriptor)
            if registered is not None and (registered.queue, registered.exchange) != (
                binding.queue,
                binding.exchange,
            ):
                self._skip(
                    queue,
                    exchange_name,
                    f"binding key [{binding.key}] collides with queue [{registered.queue}] "
                    f"bound to exchange [{registered.exchange}]",
                )
                continue

            self.registrar.register(binding.key, binding)
            bindings.append(binding)
        return bindings

    def materialize_queue(self, queue: QueueDeclaration) -> QueueDescriptor:
        descriptor = QueueDescriptor(
            name=queue.name,
            durable=queue.durable,
            exclusive=queue.exclusive,
            auto_delete=queue.auto_delete,
            arguments=dict(queue.args),
        )
        self.registrar.register(queue.name, descriptor)
        return descriptor

    def _resolve_binding(
        self, queue: QueueDeclaration, exchange_name: str
    ) -> Optional[BindingDescriptor]:
        declaration = self.config.exchange_by_name(exchange_name)
        if declaration is None:
            self._skip(queue, exchange_name, "exchange is not declared")
            return None

        rule = BINDING_RULES.get(declaration.type)
        if rule is None:
            self._skip(queue, exchange_name, f"unsupported exchange type {declaration.type!r}")
            return None

        exchange = self.registrar.lookup(exchange_name, ExchangeDescriptor)
        if exchange is None:
            self._skip(queue, exchange_name, "exchange is not registered")
            return None

        return rule(queue, exchange)

    def _skip(self, queue: QueueDeclaration, exchange_name: str, reason: str) -> None:
        self.logger.warning(
            "Queue [%s] not bound to exchange [%s]: %s", queue.name, exchange_name, reason
        )
        self.skipped.append(SkippedBinding(queue=queue.name, exchange=exchange_name, reason=reason))
