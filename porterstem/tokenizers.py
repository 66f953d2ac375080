"""
Tokenization glue for feeding running text to the stemmer.

Splitting is on runs of word characters; anything
smarter belongs upstream. Case is preserved so stems can be restored to
the original casing.
"""

import re

_WORD_RE = re.compile(r"\w+")


def tokenize(text: str) -> list[str]:
    """Split text into word tokens, keeping their case."""
    return _WORD_RE.findall(text)


def tokenize_for_index(text: str, stemmer=None, lower: bool = True) -> str:
    """
    Tokenize and stem, returning a space-separated string.

    This is the form that goes into a full-text index column:

        tokenize_for_index("Caresses and ponies")  -> "caress and poni"
    """
    if stemmer is None:
        from porterstem.stemmer import get_default_stemmer
        stemmer = get_default_stemmer()
    stem_fn = stemmer.stem_lower if lower else stemmer.stem
    return " ".join(stem_fn(token) for token in tokenize(text))


def find_tokens(text: str) -> list[tuple[int, int, str]]:
    """Tokens with their (start, end) offsets in ``text``."""
    return [(m.start(), m.end(), m.group()) for m in _WORD_RE.finditer(text)]


def replace_tokens(text: str, stemmer=None, lower: bool = False) -> str:
    """
    Stem every token in place, leaving spacing and punctuation untouched.

        replace_tokens("Running, hopping!")  -> "Run, hop!"
    """
    if stemmer is None:
        from porterstem.stemmer import get_default_stemmer
        stemmer = get_default_stemmer()
    stem_fn = stemmer.stem_lower if lower else stemmer.stem
    out = []
    last = 0
    for start, end, token in find_tokens(text):
        out.append(text[last:start])
        out.append(stem_fn(token))
        last = end
    out.append(text[last:])
    return "".join(out)
