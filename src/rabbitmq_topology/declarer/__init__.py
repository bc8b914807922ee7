"""Broker-side declaration of registered topology."""

from .pika_topology_declarer import PikaTopologyDeclarer

__all__ = ["PikaTopologyDeclarer"]
