"""
Stemmer configuration.

    config = StemmerConfig.default()      # irregular table + case restoration
    config = StemmerConfig.published()    # rules only, as in Porter (1980)
    config = StemmerConfig.from_env()     # PORTERSTEM_* overrides
"""

import logging
import os
from dataclasses import dataclass, field

from porterstem.irregular import IRREGULAR_FORMS

logger = logging.getLogger(__name__)

_FALSE_VALUES = ("0", "false", "off", "no")


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE_VALUES


@dataclass
class StemmerConfig:
    # stem -> surface forms checked before any rule runs
    irregular_forms: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(IRREGULAR_FORMS))
    # words shorter than this are returned unchanged
    min_length: int = 3
    # stem() maps the lowercase stem back onto the original casing
    restore_case: bool = True

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError(f"min_length must be at least 1, got {self.min_length}")

    @classmethod
    def default(cls) -> "StemmerConfig":
        return cls()

    @classmethod
    def published(cls) -> "StemmerConfig":
        """The rule pipeline alone, without the irregular-form table."""
        return cls(irregular_forms={})

    @classmethod
    def from_env(cls) -> "StemmerConfig":
        """
        Build a config from environment variables.

            PORTERSTEM_IRREGULAR=0      disable the irregular-form table
            PORTERSTEM_RESTORE_CASE=0   stem() returns lowercase stems
        """
        config = cls.default() if _env_flag("PORTERSTEM_IRREGULAR", True) else cls.published()
        config.restore_case = _env_flag("PORTERSTEM_RESTORE_CASE", True)
        logger.debug(
            f"Config from env: irregular={bool(config.irregular_forms)} restore_case={config.restore_case}"
        )
        return config
