"""
Stemming state: the one mutable value threaded through the rule pipeline.

    buffer   the lowercased word; steps rewrite its tail
    start    k0, inclusive lower bound of the active region (fixed per call)
    end      k, inclusive upper bound; the stem is buffer[start:end + 1]
    cursor   j, boundary cursor left by the last successful suffix match

The cursor is scratch: it only means something inside the step that set it,
with one exception: case restoration reads whatever step5 left there.
"""

from dataclasses import dataclass


@dataclass
class StemmingState:
    buffer: str = ""
    start: int = 0
    end: int = -1
    cursor: int = 0

    @classmethod
    def for_word(cls, word: str) -> "StemmingState":
        """Fresh state spanning the whole word."""
        return cls(buffer=word, start=0, end=len(word) - 1, cursor=0)

    def region(self) -> str:
        """Text of the active region."""
        return self.buffer[self.start:self.end + 1]

    def char_at(self, i: int) -> str:
        """Character at ``i``, or ``""`` when ``i`` is outside the buffer.

        Steps peek at ``end - 1``; on a one-letter region that index is
        below ``start`` and must not wrap around to the end of the string.
        """
        if self.start <= i < len(self.buffer):
            return self.buffer[i]
        return ""

    def __len__(self) -> int:
        return self.end - self.start + 1
