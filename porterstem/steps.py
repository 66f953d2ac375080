"""
Porter rule pipeline.

Each step takes the shared StemmingState and rewrites it in place; the next
step sees the result. Run order is PIPELINE:

    step1ab  plurals, -ed, -ing
    step1c   terminal y -> i
    step2    double suffixes (-ization -> -ize, ...)
    step3    -ic-, -ful, -ness, ...
    step4    -ant, -ence, ... in context <c>vcvc<v>
    step5    final -e and -ll

Steps 2-4 are literal dispatch chains. Their branch order matters: ``alli``
re-runs step2 and ``logi`` moves the cursor before replacing.
"""

from porterstem.core import StemmingState
from porterstem.predicates import (
    ends_with,
    has_vowel_in_stem,
    is_consonant,
    is_cvc,
    is_double_consonant,
    measure,
    replace_if_measured,
    replace_tail,
)


def step1ab(state: StemmingState) -> None:
    """
    Get rid of plurals and -ed or -ing.

        caresses  ->  caress        feed      ->  feed
        ponies    ->  poni          agreed    ->  agree
        sties     ->  sti           disabled  ->  disable
        tie       ->  tie           matting   ->  mat
        caress    ->  caress        mating    ->  mate
        cats      ->  cat           meeting   ->  meet
        milling   ->  mill          messing   ->  mess
        meetings  ->  meet

    ``ies`` and ``ied`` keep their ``ie`` when only one letter precedes them,
    so 'flies' -> 'fli' but 'dies' -> 'die'.
    """
    if state.char_at(state.end) == "s":
        if ends_with(state, "sses"):
            state.end -= 2
        elif ends_with(state, "ies"):
            if state.cursor == state.start:
                state.end -= 1
            else:
                state.end -= 2
        elif state.char_at(state.end - 1) != "s":
            state.end -= 1

    if ends_with(state, "ied"):
        if state.cursor == state.start:
            state.end -= 1
        else:
            state.end -= 2
    elif ends_with(state, "eed"):
        if measure(state) > 0:
            state.end -= 1
    elif (ends_with(state, "ed") or ends_with(state, "ing")) and has_vowel_in_stem(state):
        state.end = state.cursor
        if ends_with(state, "at"):
            replace_tail(state, "ate")
        elif ends_with(state, "bl"):
            replace_tail(state, "ble")
        elif ends_with(state, "iz"):
            replace_tail(state, "ize")
        elif is_double_consonant(state, state.end):
            state.end -= 1
            if state.char_at(state.end) in ("l", "s", "z"):
                state.end += 1
        elif measure(state) == 1 and is_cvc(state, state.end):
            replace_tail(state, "e")


def step1c(state: StemmingState) -> None:
    """
    Turn a terminal y into i when it follows a consonant that is not the
    whole stem.

        happy -> happi, spy -> spi, but enjoy -> enjoy
    """
    if ends_with(state, "y") and state.cursor > state.start and is_consonant(state, state.end - 1):
        state.buffer = state.buffer[:state.end] + "i" + state.buffer[state.end + 1:]


def step2(state: StemmingState) -> None:
    """Map double suffixes to single ones; the stem before must have m > 0."""
    ch = state.char_at(state.end - 1)
    if ch == "a":
        if ends_with(state, "ational"):
            replace_if_measured(state, "ate")
        elif ends_with(state, "tional"):
            replace_if_measured(state, "tion")
    elif ch == "c":
        if ends_with(state, "enci"):
            replace_if_measured(state, "ence")
        elif ends_with(state, "anci"):
            replace_if_measured(state, "ance")
    elif ch == "e":
        if ends_with(state, "izer"):
            replace_if_measured(state, "ize")
    elif ch == "l":
        if ends_with(state, "bli"):
            replace_if_measured(state, "ble")
        elif ends_with(state, "alli"):
            if measure(state) > 0:
                replace_tail(state, "al")
                step2(state)
        elif ends_with(state, "fulli"):
            replace_if_measured(state, "ful")
        elif ends_with(state, "entli"):
            replace_if_measured(state, "ent")
        elif ends_with(state, "eli"):
            replace_if_measured(state, "e")
        elif ends_with(state, "ousli"):
            replace_if_measured(state, "ous")
    elif ch == "o":
        if ends_with(state, "ization"):
            replace_if_measured(state, "ize")
        elif ends_with(state, "ation"):
            replace_if_measured(state, "ate")
        elif ends_with(state, "ator"):
            replace_if_measured(state, "ate")
    elif ch == "s":
        if ends_with(state, "alism"):
            replace_if_measured(state, "al")
        elif ends_with(state, "iveness"):
            replace_if_measured(state, "ive")
        elif ends_with(state, "fulness"):
            replace_if_measured(state, "ful")
        elif ends_with(state, "ousness"):
            replace_if_measured(state, "ous")
    elif ch == "t":
        if ends_with(state, "aliti"):
            replace_if_measured(state, "al")
        elif ends_with(state, "iviti"):
            replace_if_measured(state, "ive")
        elif ends_with(state, "biliti"):
            replace_if_measured(state, "ble")
    elif ch == "g":
        if ends_with(state, "logi"):
            # keep the l: measure and replace from just after it
            state.cursor += 1
            replace_if_measured(state, "og")


def step3(state: StemmingState) -> None:
    """Deal with -ic-, -full, -ness etc. Same strategy as step2."""
    ch = state.char_at(state.end)
    if ch == "e":
        if ends_with(state, "icate"):
            replace_if_measured(state, "ic")
        elif ends_with(state, "ative"):
            replace_if_measured(state, "")
        elif ends_with(state, "alize"):
            replace_if_measured(state, "al")
    elif ch == "i":
        if ends_with(state, "iciti"):
            replace_if_measured(state, "ic")
    elif ch == "l":
        if ends_with(state, "ical"):
            replace_if_measured(state, "ic")
        elif ends_with(state, "ful"):
            replace_if_measured(state, "")
    elif ch == "s":
        if ends_with(state, "ness"):
            replace_if_measured(state, "")


# penultimate letter -> suffixes step4 may strip, tried in order
_STEP4_SUFFIXES = {
    "a": ("al",),
    "c": ("ance", "ence"),
    "e": ("er",),
    "i": ("ic",),
    "l": ("able", "ible"),
    "n": ("ant", "ement", "ment", "ent"),
    "s": ("ism",),
    "t": ("ate", "iti"),
    "u": ("ous",),
    "v": ("ive",),
    "z": ("ize",),
}


def _step4_match(state: StemmingState) -> bool:
    ch = state.char_at(state.end - 1)
    if ch == "o":
        # -ion only after s or t; -ou takes care of -ous
        if ends_with(state, "ion") and state.char_at(state.cursor) in ("s", "t"):
            return True
        return ends_with(state, "ou")
    return any(ends_with(state, suffix) for suffix in _STEP4_SUFFIXES.get(ch, ()))


def step4(state: StemmingState) -> None:
    """Take off -ant, -ence etc. when the remaining stem has m > 1."""
    if _step4_match(state) and measure(state) > 1:
        state.end = state.cursor


def step5(state: StemmingState) -> None:
    """Remove a final -e if m > 1, and change -ll to -l if m > 1."""
    state.cursor = state.end
    if state.char_at(state.end) == "e":
        m = measure(state)
        if m > 1 or (m == 1 and not is_cvc(state, state.end - 1)):
            state.end -= 1
    if state.char_at(state.end) == "l" and is_double_consonant(state, state.end) and measure(state) > 1:
        state.end -= 1


PIPELINE = (step1ab, step1c, step2, step3, step4, step5)

STEPS = {fn.__name__: fn for fn in PIPELINE}
