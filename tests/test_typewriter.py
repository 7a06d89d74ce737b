import itertools
import random

import pytest

from studydesk.typewriter import (
    DELETING_INTERVAL_MS,
    FIRST_TYPING_INTERVAL_MS,
    PAUSE_AFTER_DELETING_MS,
    PAUSE_AFTER_TYPING_MS,
    TYPING_INTERVAL_MS,
    Phase,
    Typewriter,
)


def test_empty_phrases_rejected():
    with pytest.raises(ValueError):
        Typewriter([])


def test_starts_empty_and_typing():
    tw = Typewriter(["ab"])
    assert tw.text == ""
    assert tw.phrase == "ab"
    assert tw.phase is Phase.TYPING


def test_full_cycle_texts_and_delays():
    tw = Typewriter(["ab"])
    frames = list(itertools.islice(tw.frames(), 7))
    assert frames == [
        ("a", FIRST_TYPING_INTERVAL_MS),
        ("ab", FIRST_TYPING_INTERVAL_MS),
        ("ab", PAUSE_AFTER_TYPING_MS + DELETING_INTERVAL_MS),
        ("a", DELETING_INTERVAL_MS),
        ("", DELETING_INTERVAL_MS),
        ("", PAUSE_AFTER_DELETING_MS + TYPING_INTERVAL_MS),
        ("a", TYPING_INTERVAL_MS),
    ]


def test_phase_switches_after_typing():
    tw = Typewriter(["xyz"])
    for _ in range(3):
        tw.tick()
    assert tw.phase is Phase.TYPING
    tw.tick()
    assert tw.phase is Phase.DELETING


def test_typed_text_is_prefix_of_phrase():
    tw = Typewriter(rng=random.Random(3))
    for _ in range(200):
        tw.tick()
        assert tw.phrase.startswith(tw.text)


def test_next_phrase_comes_from_list():
    phrases = ["one", "two", "three"]
    tw = Typewriter(phrases, random.Random(7))
    picks = {tw.next_phrase() for _ in range(50)}
    assert picks <= set(phrases)
    assert tw.text == ""
    assert tw.phase is Phase.TYPING


def test_same_seed_same_sequence():
    a = Typewriter(["p", "q", "r"], random.Random(1))
    b = Typewriter(["p", "q", "r"], random.Random(1))
    assert [a.next_phrase() for _ in range(10)] == [b.next_phrase() for _ in range(10)]