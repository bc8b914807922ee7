"""Pydantic models for the external topology property tree."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from rabbitmq_topology.config import DuplicateNameMode


def relaxed_aliases(field_name: str) -> AliasChoices:
    """Accept the camelCase, snake_case and kebab-case spellings of a property."""
    return AliasChoices(to_camel(field_name), field_name, field_name.replace("_", "-"))


RELAXED_KEYS = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=AliasGenerator(validation_alias=relaxed_aliases),
)

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ExchangeProperties(BaseModel):
    """One entry of ``exchanges``."""

    model_config = RELAXED_KEYS

    name: NonEmptyStr
    type: NonEmptyStr
    custom_type: Optional[str] = None
    arguments: Optional[Dict[str, Any]] = None


class QueueProperties(BaseModel):
    """One entry of ``queues``.

    ``exchange_name`` is either a comma-delimited string or a list of names.
    """

    model_config = RELAXED_KEYS

    name: NonEmptyStr
    exchange_name: Union[str, List[str], None] = None
    routing_key: Optional[str] = None
    durable: bool = True
    exclusive: bool = False
    auto_delete: bool = False
    where_all: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "whereAll", "where_all", "where-all", "matchAll", "match_all", "match-all"
        ),
    )
    args: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, Any]] = None


class TopologyProperties(BaseModel):
    model_config = RELAXED_KEYS

    exchanges: Optional[List[ExchangeProperties]] = None
    queues: Optional[List[QueueProperties]] = None
    duplicate_names: DuplicateNameMode = DuplicateNameMode.OVERRIDE
