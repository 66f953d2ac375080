"""
Character predicates, the measure function, and region rewriting.

Everything here operates on a StemmingState and is shared by the pipeline
steps. In Porter's notation a word is

    [C](VC){m}[V]

where C is a run of consonants and V a run of vowels; ``measure`` returns m
for the stretch between ``start`` and ``cursor``.
"""

from porterstem.core import StemmingState

VOWELS = frozenset("aeiou")


def is_consonant(state: StemmingState, i: int) -> bool:
    """
    True if buffer[i] is a consonant.

    ``y`` is a consonant at the start of the region or after a vowel, and a
    vowel after a consonant. The rule refers back to the previous letter, so
    a run of ``y``s is walked back to its first non-``y`` letter, flipping
    the answer once per ``y``.
    """
    buf = state.buffer
    flipped = False
    while buf[i] == "y":
        if i == state.start:
            return not flipped
        i -= 1
        flipped = not flipped
    return (buf[i] not in VOWELS) != flipped


def has_vowel_in_stem(state: StemmingState) -> bool:
    """True if start..cursor contains a vowel."""
    return any(not is_consonant(state, i) for i in range(state.start, state.cursor + 1))


def is_double_consonant(state: StemmingState, pos: int) -> bool:
    """True if pos-1 and pos hold the same consonant."""
    if pos < state.start + 1:
        return False
    if state.buffer[pos] != state.buffer[pos - 1]:
        return False
    return is_consonant(state, pos)


def is_cvc(state: StemmingState, pos: int) -> bool:
    """
    True if pos-2, pos-1, pos is consonant-vowel-consonant and the last
    consonant is not w, x or y. Used to restore an e on short words:

        cav(e), lov(e), hop(e), crim(e), but snow, box, tray

    A two-letter word counts when it is vowel-consonant (``at``, ``on``).
    """
    if pos == 0:
        return False
    if pos == 1:
        return not is_consonant(state, 0) and is_consonant(state, 1)
    if not is_consonant(state, pos) or is_consonant(state, pos - 1) or not is_consonant(state, pos - 2):
        return False
    return state.buffer[pos] not in "wxy"


def measure(state: StemmingState) -> int:
    """
    Count VC sequences between start and cursor.

        <c><v>       -> 0
        <c>vc<v>     -> 1
        <c>vcvc<v>   -> 2
    """
    m = 0
    i = state.start
    j = state.cursor
    while i <= j and is_consonant(state, i):
        i += 1
    while i <= j:
        while i <= j and not is_consonant(state, i):
            i += 1
        if i > j:
            break
        m += 1
        while i <= j and is_consonant(state, i):
            i += 1
    return m


def ends_with(state: StemmingState, suffix: str) -> bool:
    """
    True if the active region ends with ``suffix``.

    On a match the cursor moves to the last letter before the suffix. On a
    miss it is left alone and must be treated as stale.
    """
    length = len(suffix)
    if length > len(state):
        return False
    if state.buffer[state.end - length + 1:state.end + 1] != suffix:
        return False
    state.cursor = state.end - length
    return True


def replace_tail(state: StemmingState, replacement: str) -> None:
    """Replace everything after the cursor with ``replacement``."""
    state.buffer = state.buffer[:state.cursor + 1] + replacement
    state.end = state.cursor + len(replacement)


def replace_if_measured(state: StemmingState, replacement: str) -> None:
    """replace_tail, but only when the stem before the cursor has m > 0."""
    if measure(state) > 0:
        replace_tail(state, replacement)
