"""Configuration primitives for wiring a `TopologyProvisioner`."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

from pika.adapters.blocking_connection import BlockingChannel

from rabbitmq_topology.binding_resolver import BindingResolver
from rabbitmq_topology.config import TopologyConfig
from rabbitmq_topology.config_loader import load_topology_config, load_topology_config_file
from rabbitmq_topology.contracts import IRegistrar, ITopologyDeclarer
from rabbitmq_topology.declarer import PikaTopologyDeclarer
from rabbitmq_topology.exchange_factory import ExchangeFactory
from rabbitmq_topology.registrar import InMemoryRegistrar


@dataclass(frozen=True)
class TopologyProvisionerDependencies:
    """Bundles factory functions and defaults for provisioner wiring."""

    load_config: Callable[[Mapping[str, Any]], TopologyConfig] = field(
        default=load_topology_config
    )
    load_config_file: Callable[[Optional[Union[str, Path]]], TopologyConfig] = field(
        default=load_topology_config_file
    )
    make_registrar: Callable[[], IRegistrar] = field(default=InMemoryRegistrar)
    make_exchange_factory: Callable[[], ExchangeFactory] = field(default=ExchangeFactory)
    make_binding_resolver: Callable[[TopologyConfig, IRegistrar], BindingResolver] = field(
        default=lambda config, registrar: BindingResolver(config, registrar)
    )
    make_declarer: Callable[[BlockingChannel], ITopologyDeclarer] = field(
        default=lambda channel: PikaTopologyDeclarer(channel)
    )
