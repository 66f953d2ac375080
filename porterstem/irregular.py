"""
Irregular forms: words whose stem the rules get wrong.

The table is authored stem -> surface forms and inverted once into a
read-only surface -> stem lookup, checked before any rule runs.
"""

from types import MappingProxyType
from typing import Mapping

IRREGULAR_FORMS: dict[str, tuple[str, ...]] = {
    "sky": ("sky", "skies"),
    "die": ("dying",),
    "lie": ("lying",),
    "tie": ("tying",),
    "news": ("news",),
    "inning": ("innings", "inning"),
    "outing": ("outings", "outing"),
    "canning": ("cannings", "canning"),
    "howe": ("howe",),
    "proceed": ("proceed",),
    "exceed": ("exceed",),
    "succeed": ("succeed",),
}


def build_irregular_table(forms: Mapping[str, tuple[str, ...]]) -> Mapping[str, str]:
    """
    Invert stem -> surface forms into a read-only surface -> stem mapping.

    Raises:
        ValueError: a surface form is empty or not lowercase, or two stems
            claim the same surface form.
    """
    table: dict[str, str] = {}
    for stem, surfaces in forms.items():
        if isinstance(surfaces, str):
            raise ValueError(f"Surface forms for {stem!r} must be a sequence of words, not a string")
        for surface in surfaces:
            if not surface or surface != surface.lower():
                raise ValueError(f"Irregular form must be a non-empty lowercase word: {surface!r}")
            existing = table.get(surface)
            if existing is not None and existing != stem:
                raise ValueError(
                    f"Irregular form {surface!r} maps to both {existing!r} and {stem!r}"
                )
            table[surface] = stem
    return MappingProxyType(table)
