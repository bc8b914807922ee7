"""Topology provisioning entry point."""

from .topology_provisioner import TopologyProvisioner
from .topology_provisioner_config import TopologyProvisionerDependencies

__all__ = ["TopologyProvisioner", "TopologyProvisionerDependencies"]
