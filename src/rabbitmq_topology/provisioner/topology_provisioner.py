"""Runs the topology pipeline from configuration to broker declarations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

from pika.adapters.blocking_connection import BlockingChannel

from rabbitmq_topology.binding_resolver import BindingResolver
from rabbitmq_topology.config import TopologyConfig
from rabbitmq_topology.contracts import IRegistrar, ITopologyDeclarer
from rabbitmq_topology.declarer import PikaTopologyDeclarer
from rabbitmq_topology.exchange_factory import ExchangeFactory
from rabbitmq_topology.provisioning_report import ProvisioningReport

from .topology_provisioner_config import TopologyProvisionerDependencies


class TopologyProvisioner:
    """Creates the configured exchanges, queues and bindings once at startup."""

    def __init__(
        self,
        *,
        config: TopologyConfig,
        registrar: IRegistrar,
        exchange_factory: ExchangeFactory,
        binding_resolver: BindingResolver,
        make_declarer: Callable[[BlockingChannel], ITopologyDeclarer] = PikaTopologyDeclarer,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.config = config
        self.registrar = registrar
        self.exchange_factory = exchange_factory
        self.binding_resolver = binding_resolver
        self.make_declarer = make_declarer

    @classmethod
    def from_config(
        cls,
        config: TopologyConfig,
        *,
        dependencies: Optional[TopologyProvisionerDependencies] = None,
    ) -> "TopologyProvisioner":
        deps = dependencies or TopologyProvisionerDependencies()
        registrar = deps.make_registrar()

        return cls(
            config=config,
            registrar=registrar,
            exchange_factory=deps.make_exchange_factory(),
            binding_resolver=deps.make_binding_resolver(config, registrar),
            make_declarer=deps.make_declarer,
        )

    @classmethod
    def from_mapping(
        cls,
        source: Mapping[str, Any],
        *,
        dependencies: Optional[TopologyProvisionerDependencies] = None,
    ) -> "TopologyProvisioner":
        deps = dependencies or TopologyProvisionerDependencies()
        return cls.from_config(deps.load_config(source), dependencies=deps)

    @classmethod
    def from_file(
        cls,
        path: Optional[Union[str, Path]] = None,
        *,
        dependencies: Optional[TopologyProvisionerDependencies] = None,
    ) -> "TopologyProvisioner":
        deps = dependencies or TopologyProvisionerDependencies()
        return cls.from_config(deps.load_config_file(path), dependencies=deps)

    def provision(self, channel: Optional[BlockingChannel] = None) -> ProvisioningReport:
        """Register the topology and, given a channel, declare it on the broker.

        Exchanges are all registered before any queue is bound to them.
        """
        self.logger.info(
            "Provisioning topology with %d exchange(s) and %d queue(s).",
            len(self.config.exchanges()),
            len(self.config.queues()),
        )

        self.exchange_factory.create_all(self.config.exchanges(), self.registrar)
        self.binding_resolver.resolve_all()

        if channel is not None:
            self.make_declarer(channel).declare(self.registrar)

        report = ProvisioningReport(
            exchanges=tuple(self.registrar.exchanges()),
            queues=tuple(self.registrar.queues()),
            bindings=tuple(self.registrar.bindings()),
            skipped_exchanges=tuple(self.exchange_factory.skipped),
            skipped_bindings=tuple(self.binding_resolver.skipped),
        )

        if report.warning_count:
            self.logger.warning(
                "Topology provisioned with %d skipped declaration(s).", report.warning_count
            )
        else:
            self.logger.info("Topology provisioned.")
        return report
