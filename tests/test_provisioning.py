"""End-to-end provisioning tests from a property tree to broker declarations."""

import json
from unittest.mock import Mock

import pytest
from pika.adapters.blocking_connection import BlockingChannel

from rabbitmq_topology import (
    BindingDescriptor,
    DuplicateDeclarationError,
    ExchangeDescriptor,
    HeadersMatchMode,
    TopologyProvisioner,
    topic_matches,
)


@pytest.fixture
def properties():
    return {
        "spring": {
            "rabbitmq": {
                "exchanges": [
                    {"name": "E1", "type": "TOPIC"},
                    {"name": "E2", "type": "FANOUT"},
                    {"name": "reports", "type": "HEADERS"},
                    {
                        "name": "delayed",
                        "type": "CUSTOM",
                        "customType": "x-delayed-message",
                        "arguments": {"x-delayed-type": "topic"},
                    },
                    {"name": "hashing", "type": "consistent-hash"},
                ],
                "queues": [
                    {"name": "Q", "exchangeName": "E1,E2", "routingKey": "user.*"},
                    {"name": "orphan", "exchangeName": "Emissing,E2"},
                    {
                        "name": "any-report",
                        "exchangeName": "reports",
                        "whereAll": False,
                        "headers": {"type": "report"},
                    },
                    {
                        "name": "all-report",
                        "exchangeName": "reports",
                        "headers": {"type": "report", "format": "pdf"},
                    },
                    {"name": "later", "exchangeName": "delayed", "routingKey": "job.retry"},
                ],
            }
        }
    }


@pytest.fixture
def channel():
    return Mock(spec=BlockingChannel)


def test_multi_exchange_queue(properties):
    report = TopologyProvisioner.from_mapping(properties).provision()

    bindings = {binding.key: binding for binding in report.bindings}
    assert bindings["Q-E1"].routing_key == "user.*"
    assert bindings["Q-E2"].routing_key is None
    assert topic_matches(bindings["Q-E1"].routing_key, "user.created")


def test_missing_exchange_reference_is_isolated(properties):
    report = TopologyProvisioner.from_mapping(properties).provision()

    keys = [binding.key for binding in report.bindings]
    assert "orphan-E2" in keys
    assert "orphan-Emissing" not in keys
    assert ("orphan", "Emissing") in [(s.queue, s.exchange) for s in report.skipped_bindings]


def test_headers_match_modes(properties):
    provisioner = TopologyProvisioner.from_mapping(properties)
    provisioner.provision()

    lookup = provisioner.registrar.lookup
    assert lookup("any-report-reports", BindingDescriptor).match_mode is HeadersMatchMode.ANY
    assert lookup("all-report-reports", BindingDescriptor).match_mode is HeadersMatchMode.ALL


def test_custom_exchange_passthrough(properties):
    provisioner = TopologyProvisioner.from_mapping(properties)
    provisioner.provision()

    exchange = provisioner.registrar.lookup("delayed", ExchangeDescriptor)
    assert exchange.wire_type == "x-delayed-message"
    assert exchange.durable is True
    assert exchange.auto_delete is False
    assert exchange.arguments == {"x-delayed-type": "topic"}
    binding = provisioner.registrar.lookup("later-delayed", BindingDescriptor)
    assert binding.routing_key == "job.retry"
    assert binding.arguments == {}


def test_unrecognized_exchange_type_is_reported(properties):
    report = TopologyProvisioner.from_mapping(properties).provision()

    assert [skipped.name for skipped in report.skipped_exchanges] == ["hashing"]
    assert "hashing" not in [exchange.name for exchange in report.exchanges]


def test_declares_against_channel(properties, channel):
    TopologyProvisioner.from_mapping(properties).provision(channel)

    assert channel.exchange_declare.call_count == 4
    assert channel.queue_declare.call_count == 5
    bound = [
        (c.kwargs["queue"], c.kwargs["exchange"]) for c in channel.queue_bind.call_args_list
    ]
    assert bound == [
        ("Q", "E1"),
        ("Q", "E2"),
        ("orphan", "E2"),
        ("any-report", "reports"),
        ("all-report", "reports"),
        ("later", "delayed"),
    ]


def test_reprovisioning_is_idempotent(properties):
    provisioner = TopologyProvisioner.from_mapping(properties)

    first = provisioner.provision()
    second = provisioner.provision()

    assert second.exchanges == first.exchanges
    assert second.queues == first.queues
    assert second.bindings == first.bindings
    assert second.skipped_bindings == first.skipped_bindings


def test_from_file(tmp_path, properties):
    path = tmp_path / "topology.json"
    path.write_text(json.dumps(properties), encoding="utf-8")

    report = TopologyProvisioner.from_file(path).provision()

    assert len(report.bindings) == 6


def test_duplicates_rejected_before_registration(properties):
    rabbitmq = properties["spring"]["rabbitmq"]
    rabbitmq["duplicate-names"] = "reject"
    rabbitmq["queues"].append({"name": "Q", "exchangeName": "E2"})

    with pytest.raises(DuplicateDeclarationError):
        TopologyProvisioner.from_mapping(properties)
