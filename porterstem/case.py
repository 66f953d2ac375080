"""
Case restoration for stems produced from mixed-case words.
"""

from porterstem.core import StemmingState

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only; every other character is left as is."""
    return text.translate(_ASCII_LOWER)


def restore_case(original: str, stem: str, state: StemmingState) -> str:
    """
    Map a lowercase stem back onto the casing of ``original``.

    Positions start..cursor are compared against the original word: where
    the letter survived stemming the original (cased) letter is kept,
    otherwise the stem's letter is used. ``state`` must be the one the stem
    was just produced with, since the span comes from the cursor step5 left
    behind rather than from the stem length.

        restore_case("RUNNING", "run", state)  -> "RUN"
        restore_case("Happy", "happi", state)  -> "Happi"
        restore_case("HOPING", "hope", state)  -> "HOPe"
    """
    lower = ascii_lower(original)
    out = []
    for i in range(state.start, state.cursor + 1):
        # step5 leaves the cursor on a dropped -e or -l
        if i >= len(stem):
            break
        if i < len(original) and lower[i] == stem[i]:
            out.append(original[i])
        else:
            out.append(stem[i])
    return "".join(out)
