"""Typewriter banner that types a random phrase, then erases it."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple

DEFAULT_PHRASES = (
    "Keep your determination!",
    "You are filled with the power of determination.",
    "It's a beautiful day outside...",
    "Geeetttt dunked on~",
    "Beware of the man who speaks in hands.",
    "Debugging is fun!",
)

FIRST_TYPING_INTERVAL_MS = 120
TYPING_INTERVAL_MS = 90
DELETING_INTERVAL_MS = 30
PAUSE_AFTER_TYPING_MS = 1000
PAUSE_AFTER_DELETING_MS = 500


class Phase(Enum):
    TYPING = "typing"
    DELETING = "deleting"


class Typewriter:
    """State of the banner; each ``tick`` advances one step.

    ``tick`` returns the delay in milliseconds until the next tick, including
    the pauses between typing and erasing.
    """

    def __init__(self, phrases: Sequence[str] = DEFAULT_PHRASES, rng: Optional[random.Random] = None):
        if not phrases:
            raise ValueError("at least one phrase is required")
        self._phrases = tuple(phrases)
        self._rng = rng or random.Random()
        self.text = ""
        self.phrase = ""
        self.phase = Phase.TYPING
        self.interval_ms = FIRST_TYPING_INTERVAL_MS
        self._pos = 0
        self.next_phrase()

    def next_phrase(self) -> str:
        """Pick a random phrase and start typing it from the beginning."""
        self.phrase = self._phrases[self._rng.randrange(len(self._phrases))]
        self._pos = 0
        self.phase = Phase.TYPING
        self.text = ""
        return self.phrase

    def tick(self) -> int:
        if self.phase is Phase.TYPING:
            if self._pos < len(self.phrase):
                self.text += self.phrase[self._pos]
                self._pos += 1
                return self.interval_ms
            self.phase = Phase.DELETING
            self.interval_ms = DELETING_INTERVAL_MS
            return PAUSE_AFTER_TYPING_MS + self.interval_ms

        if self.text:
            self.text = self.text[:-1]
            return self.interval_ms
        self.next_phrase()
        self.interval_ms = TYPING_INTERVAL_MS
        return PAUSE_AFTER_DELETING_MS + self.interval_ms

    def frames(self) -> Iterator[Tuple[str, int]]:
        """Endless ``(text, delay_ms)`` pairs, one per tick."""
        while True:
            delay = self.tick()
            yield self.text, delay