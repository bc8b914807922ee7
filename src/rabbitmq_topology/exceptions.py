"""Errors raised while validating a topology configuration."""


class TopologyConfigError(ValueError):
    """The topology configuration is structurally invalid."""


class CustomExchangeTypeError(TopologyConfigError):
    """A custom exchange lacks its wire type, or a standard exchange sets one."""


class DuplicateDeclarationError(TopologyConfigError):
    """Two exchanges or two queues share a name while duplicates are rejected."""
