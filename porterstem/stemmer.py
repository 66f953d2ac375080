"""
Porter Stemmer: public API.

A word stemmer based on the Porter stemming algorithm:

    Porter, M. "An algorithm for suffix stripping."
    Program 14.3 (1980): 130-137.

with the NLTK departures (``ies``/``ied`` on one-letter stems, y -> i only
after a consonant, ``bli``, ``logi``) and an irregular-form table.

Usage:
    from porterstem import PorterStemmer

    stemmer = PorterStemmer()
    stemmer.stem("Caresses")         # "Caress"
    stemmer.stem_lower("relational") # "relat"
    stemmer.trace("hopefulness")     # region after each step
"""

import logging
from typing import Iterable, Optional

from porterstem.case import ascii_lower, restore_case
from porterstem.config import StemmerConfig
from porterstem.core import StemmingState
from porterstem.irregular import build_irregular_table
from porterstem.steps import PIPELINE, STEPS
from porterstem.tokenizers import tokenize

logger = logging.getLogger(__name__)


def _check_word(word) -> None:
    if not isinstance(word, str):
        raise TypeError(f"Expected a str, got {type(word).__name__}")


class PorterStemmer:
    """
    Reduces English words to their stems.

    The instance only holds the read-only irregular table, so one stemmer
    can be shared freely; every call works on its own StemmingState.
    """

    def __init__(self, config: Optional[StemmerConfig] = None):
        self.config = config or StemmerConfig.default()
        self.irregular = build_irregular_table(self.config.irregular_forms)
        logger.info(f"PorterStemmer ready ({len(self.irregular)} irregular forms)")

    def _short_circuit(self, state: StemmingState) -> Optional[str]:
        """Irregular-table hit or too-short word, else None."""
        region = state.region()
        canonical = self.irregular.get(region)
        if canonical is not None:
            state.cursor = state.start + len(canonical) - 1
            return canonical
        if len(state) < self.config.min_length:
            state.cursor = state.end
            return state.buffer
        return None

    def stem_word(self, word: str, state: Optional[StemmingState] = None) -> str:
        """
        Stem an already lowercased word.

        Pass ``state`` to keep the pipeline state around afterwards (case
        restoration needs the cursor it ends with).
        """
        if state is None:
            state = StemmingState.for_word(word)
        else:
            state.buffer, state.start, state.end, state.cursor = word, 0, len(word) - 1, 0

        result = self._short_circuit(state)
        if result is not None:
            return result

        for step in PIPELINE:
            step(state)
        return state.region()

    def stem_lower(self, word: str) -> str:
        """Lowercase stem of ``word``, without case restoration."""
        _check_word(word)
        return self.stem_word(ascii_lower(word))

    def stem(self, word: str) -> str:
        """Stem ``word`` and, unless disabled in the config, restore its casing."""
        _check_word(word)
        state = StemmingState()
        result = self.stem_word(ascii_lower(word), state)
        if not self.config.restore_case:
            return result
        return restore_case(word, result, state)

    def stem_step(self, word: str, step: str) -> str:
        """
        Run a single pipeline step on a fresh word.

        The irregular table and the length guard still apply. Useful for
        checking one rule in isolation:

            stemmer.stem_step("agreed", "step1ab")  -> "agree"
        """
        _check_word(word)
        try:
            fn = STEPS[step]
        except KeyError:
            raise ValueError(f"Unknown step: {step}. Use one of {', '.join(STEPS)}") from None

        state = StemmingState.for_word(ascii_lower(word))
        result = self._short_circuit(state)
        if result is not None:
            return result
        fn(state)
        return state.region()

    def trace(self, word: str) -> list[tuple[str, str]]:
        """
        The active region after each step, as (step name, region) pairs.

        A short-circuited word yields a single ("irregular", stem) or
        ("short", word) entry.
        """
        _check_word(word)
        state = StemmingState.for_word(ascii_lower(word))
        result = self._short_circuit(state)
        if result is not None:
            reason = "irregular" if state.region() in self.irregular else "short"
            logger.debug(f"{word!r} bypassed the pipeline ({reason})")
            return [(reason, result)]

        steps = []
        for step in PIPELINE:
            step(state)
            steps.append((step.__name__, state.region()))
            logger.debug(f"{step.__name__}: {state.region()!r} cursor={state.cursor}")
        return steps

    def stem_tokens(self, tokens: Iterable[str]) -> list[str]:
        """Stem each token in turn."""
        return [self.stem(token) for token in tokens]

    def stem_text(self, text: str) -> list[str]:
        """Tokenize ``text`` and stem every token."""
        return self.stem_tokens(tokenize(text))


# Lazy module-level default
_default: Optional[PorterStemmer] = None


def get_default_stemmer() -> PorterStemmer:
    global _default
    if _default is None:
        _default = PorterStemmer()
    return _default


def stem(word: str) -> str:
    """Stem with the default stemmer, restoring the original casing."""
    return get_default_stemmer().stem(word)


def stem_lower(word: str) -> str:
    """Lowercase stem with the default stemmer."""
    return get_default_stemmer().stem_lower(word)
