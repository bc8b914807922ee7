"""Tests for the topology configuration model."""

import logging

import pytest

from rabbitmq_topology.config import (
    DuplicateNameMode,
    ExchangeDeclaration,
    ExchangeType,
    QueueDeclaration,
    TopologyConfig,
)
from rabbitmq_topology.exceptions import (
    CustomExchangeTypeError,
    DuplicateDeclarationError,
    TopologyConfigError,
)


def test_custom_exchange_requires_custom_type():
    with pytest.raises(CustomExchangeTypeError):
        ExchangeDeclaration(name="delayed", type=ExchangeType.CUSTOM)


def test_standard_exchange_rejects_custom_type():
    with pytest.raises(CustomExchangeTypeError):
        ExchangeDeclaration(name="events", type=ExchangeType.TOPIC, custom_type="x-delayed-message")


def test_exchange_requires_name():
    with pytest.raises(TopologyConfigError):
        ExchangeDeclaration(name="", type=ExchangeType.DIRECT)


def test_queue_defaults():
    queue = QueueDeclaration(name="reports")

    assert queue.exchange_names == ()
    assert queue.routing_key == ""
    assert queue.durable is True
    assert queue.exclusive is False
    assert queue.auto_delete is False
    assert queue.match_all is True
    assert queue.args == {}
    assert queue.headers == {}


def test_queue_exchange_names_become_tuple():
    queue = QueueDeclaration(name="reports", exchange_names=["a", "b"])

    assert queue.exchange_names == ("a", "b")


def test_queue_rejects_string_exchange_names():
    with pytest.raises(TopologyConfigError):
        QueueDeclaration(name="reports", exchange_names="a,b")


def test_config_preserves_declared_order():
    exchanges = [
        ExchangeDeclaration(name="b", type=ExchangeType.DIRECT),
        ExchangeDeclaration(name="a", type=ExchangeType.FANOUT),
    ]
    queues = [QueueDeclaration(name="q2"), QueueDeclaration(name="q1")]

    config = TopologyConfig(exchanges, queues)

    assert [exchange.name for exchange in config.exchanges()] == ["b", "a"]
    assert [queue.name for queue in config.queues()] == ["q2", "q1"]


def test_exchange_by_name():
    topic = ExchangeDeclaration(name="events", type=ExchangeType.TOPIC)
    config = TopologyConfig([topic])

    assert config.exchange_by_name("events") is topic
    assert config.exchange_by_name("missing") is None


def test_duplicates_override_by_default(caplog):
    first = ExchangeDeclaration(name="events", type=ExchangeType.TOPIC)
    second = ExchangeDeclaration(name="events", type=ExchangeType.FANOUT)

    with caplog.at_level(logging.WARNING):
        config = TopologyConfig([first, second])

    assert config.duplicate_names is DuplicateNameMode.OVERRIDE
    assert config.exchange_by_name("events") is second
    assert "events" in caplog.text


def test_duplicate_exchanges_rejected():
    exchanges = [
        ExchangeDeclaration(name="events", type=ExchangeType.TOPIC),
        ExchangeDeclaration(name="events", type=ExchangeType.FANOUT),
    ]

    with pytest.raises(DuplicateDeclarationError, match="events"):
        TopologyConfig(exchanges, duplicate_names=DuplicateNameMode.REJECT)


def test_duplicate_queues_rejected():
    queues = [QueueDeclaration(name="jobs"), QueueDeclaration(name="jobs")]

    with pytest.raises(DuplicateDeclarationError, match="queue"):
        TopologyConfig(queues=queues, duplicate_names=DuplicateNameMode.REJECT)


def test_exchange_and_queue_may_share_a_name():
    config = TopologyConfig(
        [ExchangeDeclaration(name="jobs", type=ExchangeType.DIRECT)],
        [QueueDeclaration(name="jobs")],
        duplicate_names=DuplicateNameMode.REJECT,
    )

    assert config.exchange_by_name("jobs") is not None


def test_effective_queues_keep_last_declaration_in_declared_order():
    first_jobs = QueueDeclaration(name="jobs", exchange_names=("E1",))
    audit = QueueDeclaration(name="audit")
    last_jobs = QueueDeclaration(name="jobs", exchange_names=("E2",))

    config = TopologyConfig(queues=[first_jobs, audit, last_jobs])

    assert config.queues() == (first_jobs, audit, last_jobs)
    assert config.effective_queues() == (audit, last_jobs)


@pytest.mark.parametrize(
    "raw_type, expected",
    [
        ("CUSTOM", ExchangeType.CUSTOM),
        ("custom", ExchangeType.CUSTOM),
        (" Topic ", ExchangeType.TOPIC),
    ],
)
def test_exchange_type_string_is_normalized(raw_type, expected):
    custom_type = "x-delayed-message" if expected is ExchangeType.CUSTOM else None

    declaration = ExchangeDeclaration(name="d", type=raw_type, custom_type=custom_type)

    assert declaration.type is expected


def test_unrecognized_exchange_type_string_is_kept():
    declaration = ExchangeDeclaration(name="odd", type="x-consistent-hash")

    assert declaration.type == "x-consistent-hash"
