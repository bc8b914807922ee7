"""Adapters that turn external configuration into a topology model."""

from .topology_config_loader import (
    CONFIG_PATH_ENV_VAR,
    load_topology_config,
    load_topology_config_file,
    parse_exchange_names,
)

__all__ = [
    "CONFIG_PATH_ENV_VAR",
    "load_topology_config",
    "load_topology_config_file",
    "parse_exchange_names",
]
