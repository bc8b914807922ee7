"""Builds a :class:`TopologyConfig` from a property tree or a JSON document.

The property tree has the shape::

    {
        "exchanges": [{"name": ..., "type": ..., "customType": ..., "arguments": {...}}],
        "queues": [{"name": ..., "exchangeName": "a,b", "routingKey": ..., "durable": ...,
                    "exclusive": ..., "autoDelete": ..., "whereAll": ..., "args": {...},
                    "headers": {...}}],
    }

and may be nested under ``spring.rabbitmq``. Every property may be spelled in
camelCase, snake_case or kebab-case (``customType``, ``custom_type``,
``custom-type``). The tree is validated by the models in
:mod:`rabbitmq_topology.config_loader.topology_properties`.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from rabbitmq_topology.config import ExchangeDeclaration, QueueDeclaration, TopologyConfig
from rabbitmq_topology.exceptions import TopologyConfigError

from .topology_properties import ExchangeProperties, QueueProperties, TopologyProperties

CONFIG_PATH_ENV_VAR = "TOPOLOGY_CONFIG_PATH"
PROPERTY_PREFIX = ("spring", "rabbitmq")
EXCHANGE_NAME_SEPARATOR = ","

logger = logging.getLogger(__name__)


def load_topology_config(source: Mapping[str, Any]) -> TopologyConfig:
    """Parse a property tree into a validated topology configuration."""
    if not isinstance(source, Mapping):
        raise TopologyConfigError("Topology configuration must be a mapping.")

    try:
        properties = TopologyProperties.model_validate(_unwrap_prefix(source))
    except ValidationError as exc:
        raise TopologyConfigError(f"Invalid topology configuration: {exc}") from exc

    return TopologyConfig(
        [_to_exchange(entry) for entry in properties.exchanges or []],
        [_to_queue(entry) for entry in properties.queues or []],
        duplicate_names=properties.duplicate_names,
    )


def load_topology_config_file(path: Optional[Union[str, Path]] = None) -> TopologyConfig:
    """Read a JSON topology document from ``path`` or ``TOPOLOGY_CONFIG_PATH``."""
    raw_path = str(path or os.getenv(CONFIG_PATH_ENV_VAR) or "").strip()
    if not raw_path:
        raise ValueError(
            "Topology config path must be provided via argument or "
            f"{CONFIG_PATH_ENV_VAR} environment variable."
        )

    config_path = Path(raw_path)
    logger.info("Loading topology configuration from %s", config_path)
    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise TopologyConfigError(
            f"Failed to decode topology configuration {config_path} as JSON."
        ) from exc

    return load_topology_config(payload)


def parse_exchange_names(value: Union[str, List[str], Tuple[str, ...], None]) -> Tuple[str, ...]:
    """Split a comma-delimited exchange reference into trimmed names."""
    if value is None:
        return ()
    parts = value.split(EXCHANGE_NAME_SEPARATOR) if isinstance(value, str) else list(value)
    return tuple(part.strip() for part in parts if part.strip())


def _unwrap_prefix(source: Mapping[str, Any]) -> Mapping[str, Any]:
    node = source
    for segment in PROPERTY_PREFIX:
        child = node.get(segment)
        if not isinstance(child, Mapping):
            return source
        node = child
    return node


def _to_exchange(properties: ExchangeProperties) -> ExchangeDeclaration:
    return ExchangeDeclaration(
        name=properties.name,
        type=properties.type,
        custom_type=(properties.custom_type or "").strip() or None,
        arguments=dict(properties.arguments or {}),
    )


def _to_queue(properties: QueueProperties) -> QueueDeclaration:
    exchange_names = parse_exchange_names(properties.exchange_name)
    if not exchange_names:
        logger.warning("Queue [%s] does not reference any exchange.", properties.name)

    return QueueDeclaration(
        name=properties.name,
        exchange_names=exchange_names,
        routing_key=properties.routing_key or "",
        durable=properties.durable,
        exclusive=properties.exclusive,
        auto_delete=properties.auto_delete,
        match_all=properties.where_all,
        args=dict(properties.args or {}),
        headers=dict(properties.headers or {}),
    )
