"""
porterstem: Porter suffix-stripping stemmer for English.

Usage:
    from porterstem import stem, stem_lower

    stem("Caresses")        # "Caress"
    stem_lower("hopping")   # "hop"

    # With a custom configuration
    from porterstem import PorterStemmer, StemmerConfig

    stemmer = PorterStemmer(StemmerConfig.published())
    stemmer.stem_lower("skies")   # "ski" (no irregular table)
"""

from porterstem.stemmer import PorterStemmer, get_default_stemmer, stem, stem_lower
from porterstem.config import StemmerConfig
from porterstem.core import StemmingState
from porterstem.case import restore_case
from porterstem.irregular import IRREGULAR_FORMS

__all__ = [
    "PorterStemmer", "StemmerConfig", "StemmingState", "IRREGULAR_FORMS",
    "get_default_stemmer", "restore_case", "stem", "stem_lower",
]
__version__ = "0.1.0"
