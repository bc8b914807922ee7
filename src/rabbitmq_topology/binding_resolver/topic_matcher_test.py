"""Tests for topic pattern matching."""

import pytest

from rabbitmq_topology.binding_resolver import topic_matches


@pytest.mark.parametrize(
    "pattern, routing_key, expected",
    [
        ("user.created", "user.created", True),
        ("user.created", "user.deleted", False),
        ("*.user", "admin.user", True),
        ("*.user", "user", False),
        ("*.user", "a.b.user", False),
        ("#.user", "user", True),
        ("#.user", "a.b.user", True),
        ("#", "", True),
        ("#", "anything.at.all", True),
        ("*", "", False),
        ("report.#.daily", "report.daily", True),
        ("report.#.daily", "report.eu.sales.daily", True),
        ("report.#.daily", "report.eu.weekly", False),
    ],
)
def test_topic_matches(pattern, routing_key, expected):
    assert topic_matches(pattern, routing_key) is expected


def test_many_multi_word_wildcards_match_quickly():
    pattern = "#." * 12 + "z"
    words = [f"w{index}" for index in range(30)]

    assert topic_matches(pattern, ".".join(words)) is False
    assert topic_matches(pattern, ".".join(words + ["z"])) is True
