"""Declares a registered topology through a pika channel."""

from __future__ import annotations

import logging

from pika.adapters.blocking_connection import BlockingChannel

from rabbitmq_topology.contracts import IRegistrar, ITopologyDeclarer


class PikaTopologyDeclarer(ITopologyDeclarer):
    """Issues ``exchange.declare``, ``queue.declare`` and ``queue.bind`` on an open channel.

    The channel is owned by the caller and left open. Broker errors propagate.
    """

    def __init__(self, channel: BlockingChannel) -> None:
        self.channel = channel
        self.logger = logging.getLogger(__name__)

    def declare(self, registrar: IRegistrar) -> None:
        exchanges = registrar.exchanges()
        for exchange in exchanges:
            self.logger.debug("Declaring exchange %s (%s)", exchange.name, exchange.wire_type)
            self.channel.exchange_declare(
                exchange=exchange.name,
                exchange_type=exchange.wire_type,
                durable=exchange.durable,
                auto_delete=exchange.auto_delete,
                arguments=dict(exchange.arguments),
            )

        queues = registrar.queues()
        for queue in queues:
            self.logger.debug("Declaring queue %s", queue.name)
            self.channel.queue_declare(
                queue=queue.name,
                durable=queue.durable,
                exclusive=queue.exclusive,
                auto_delete=queue.auto_delete,
                arguments=dict(queue.arguments),
            )

        bindings = registrar.bindings()
        for binding in bindings:
            self.logger.debug("Binding queue %s to exchange %s", binding.queue, binding.exchange)
            self.channel.queue_bind(
                queue=binding.queue,
                exchange=binding.exchange,
                routing_key=binding.routing_key or "",
                arguments=binding.arguments,
            )

        self.logger.info(
            "Declared %d exchange(s), %d queue(s) and %d binding(s).",
            len(exchanges),
            len(queues),
            len(bindings),
        )
