"""AMQP topic pattern matching."""

from __future__ import annotations

from typing import List

WORD_SEPARATOR = "."
SINGLE_WORD = "*"
ZERO_OR_MORE_WORDS = "#"


def topic_matches(pattern: str, routing_key: str) -> bool:
    """Return True when ``routing_key`` matches the topic binding ``pattern``.

    ``*`` matches exactly one dot-separated word and ``#`` matches zero or more.
    Runs in time proportional to pattern words times routing key words.
    """
    pattern_words = pattern.split(WORD_SEPARATOR) if pattern else []
    key_words = routing_key.split(WORD_SEPARATOR) if routing_key else []

    # reachable[k]: the pattern words seen so far can consume exactly key_words[:k].
    reachable: List[bool] = [True] + [False] * len(key_words)
    for word in pattern_words:
        if word == ZERO_OR_MORE_WORDS:
            any_before = False
            for index, matched in enumerate(reachable):
                any_before = any_before or matched
                reachable[index] = any_before
        else:
            reachable = [False] + [
                reachable[index] and (word == SINGLE_WORD or word == key_word)
                for index, key_word in enumerate(key_words)
            ]
    return reachable[-1]
