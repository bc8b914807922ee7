"""Immutable broker objects built from the topology configuration."""

from typing import Union

from .binding_descriptor import BindingDescriptor, HeadersMatchMode, binding_key
from .exchange_descriptor import ExchangeDescriptor
from .queue_descriptor import QueueDescriptor

TopologyDescriptor = Union[ExchangeDescriptor, QueueDescriptor, BindingDescriptor]

__all__ = [
    "BindingDescriptor",
    "ExchangeDescriptor",
    "HeadersMatchMode",
    "QueueDescriptor",
    "TopologyDescriptor",
    "binding_key",
]
