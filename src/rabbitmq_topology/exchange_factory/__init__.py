"""Exchange descriptor creation."""

from .exchange_factory import STANDARD_WIRE_TYPES, ExchangeFactory

__all__ = ["ExchangeFactory", "STANDARD_WIRE_TYPES"]
