"""Queue and binding resolution."""

from .binding_resolver import BINDING_RULES, BindingResolver
from .topic_matcher import topic_matches

__all__ = ["BINDING_RULES", "BindingResolver", "topic_matches"]
