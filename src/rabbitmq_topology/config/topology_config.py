"""Validated set of exchange and queue declarations."""

from __future__ import annotations

import logging
from collections import Counter
from enum import Enum
from typing import Dict, Iterable, Optional, Sequence, Tuple

from rabbitmq_topology.exceptions import DuplicateDeclarationError

from .exchange_declaration import ExchangeDeclaration
from .queue_declaration import QueueDeclaration


class DuplicateNameMode(str, Enum):
    """How declarations sharing a name are treated."""

    OVERRIDE = "override"
    REJECT = "reject"


class TopologyConfig:
    """Holds the declared exchanges and queues in their declared order."""

    def __init__(
        self,
        exchanges: Iterable[ExchangeDeclaration] = (),
        queues: Iterable[QueueDeclaration] = (),
        *,
        duplicate_names: DuplicateNameMode = DuplicateNameMode.OVERRIDE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.duplicate_names = duplicate_names
        self._exchanges: Tuple[ExchangeDeclaration, ...] = tuple(exchanges)
        self._queues: Tuple[QueueDeclaration, ...] = tuple(queues)

        self._check_duplicates("exchange", [exchange.name for exchange in self._exchanges])
        self._check_duplicates("queue", [queue.name for queue in self._queues])

        # Later declarations win when duplicates are allowed.
        self._exchange_index: Dict[str, ExchangeDeclaration] = {
            exchange.name: exchange for exchange in self._exchanges
        }
        self._queue_positions: Dict[str, int] = {
            queue.name: position for position, queue in enumerate(self._queues)
        }

    def exchanges(self) -> Tuple[ExchangeDeclaration, ...]:
        return self._exchanges

    def queues(self) -> Tuple[QueueDeclaration, ...]:
        return self._queues

    def effective_queues(self) -> Tuple[QueueDeclaration, ...]:
        """Queues left after duplicate names are resolved, in declared order."""
        return tuple(
            queue
            for position, queue in enumerate(self._queues)
            if self._queue_positions[queue.name] == position
        )

    def exchange_by_name(self, name: str) -> Optional[ExchangeDeclaration]:
        return self._exchange_index.get(name)

    def _check_duplicates(self, kind: str, names: Sequence[str]) -> None:
        duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
        if not duplicates:
            return

        if self.duplicate_names is DuplicateNameMode.REJECT:
            raise DuplicateDeclarationError(
                f"Duplicate {kind} names in topology configuration: {', '.join(duplicates)}"
            )

        for name in duplicates:
            self.logger.warning(
                "%s [%s] is declared more than once; the last declaration wins.",
                kind.capitalize(),
                name,
            )
