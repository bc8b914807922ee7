"""Declarative RabbitMQ topology provisioning: exchanges, queues and bindings."""

from .binding_resolver import BindingResolver, topic_matches
from .config import (
    DuplicateNameMode,
    ExchangeDeclaration,
    ExchangeType,
    QueueDeclaration,
    TopologyConfig,
)
from .config_loader import load_topology_config, load_topology_config_file
from .contracts import IRegistrar, ITopologyDeclarer
from .declarer import PikaTopologyDeclarer
from .descriptors import (
    BindingDescriptor,
    ExchangeDescriptor,
    HeadersMatchMode,
    QueueDescriptor,
)
from .exceptions import (
    CustomExchangeTypeError,
    DuplicateDeclarationError,
    TopologyConfigError,
)
from .exchange_factory import ExchangeFactory
from .provisioner import TopologyProvisioner, TopologyProvisionerDependencies
from .provisioning_report import ProvisioningReport, SkippedBinding, SkippedExchange
from .registrar import InMemoryRegistrar

__all__ = [
    "BindingDescriptor",
    "BindingResolver",
    "CustomExchangeTypeError",
    "DuplicateDeclarationError",
    "DuplicateNameMode",
    "ExchangeDeclaration",
    "ExchangeDescriptor",
    "ExchangeFactory",
    "ExchangeType",
    "HeadersMatchMode",
    "IRegistrar",
    "ITopologyDeclarer",
    "InMemoryRegistrar",
    "PikaTopologyDeclarer",
    "ProvisioningReport",
    "QueueDeclaration",
    "QueueDescriptor",
    "SkippedBinding",
    "SkippedExchange",
    "TopologyConfig",
    "TopologyConfigError",
    "TopologyProvisioner",
    "TopologyProvisionerDependencies",
    "load_topology_config",
    "load_topology_config_file",
    "topic_matches",
]
