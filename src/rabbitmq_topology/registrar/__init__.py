"""Registrar implementations."""

from .in_memory_registrar import InMemoryRegistrar

__all__ = ["InMemoryRegistrar"]
