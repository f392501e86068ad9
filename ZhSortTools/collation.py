####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

__all__ = ['CollationError', 'CollationService']

####################################################################################################

import logging

# To sort correctly latin and unicode
from icu import Collator, ICUError, Locale

from .options import ChineseVariant

####################################################################################################

_module_logger = logging.getLogger(__name__)

####################################################################################################

class CollationError(NameError):
    pass

####################################################################################################

class CollationService:

    """Wrap an ICU collator for a locale, e.g. 'zh-TW'.

    zh-TW collates by stroke count, zh-CN by pinyin.
    """

    ##############################################

    @classmethod
    def for_variant(cls, variant: ChineseVariant) -> 'CollationService':
        return cls(variant.locale)

    ##############################################

    def __init__(self, locale: str) -> None:
        self._locale = str(locale)
        # ICU uses zh_TW
        _ = self._locale.replace('-', '_')
        try:
            self._collator = Collator.createInstance(Locale(_))
        except ICUError as e:
            raise CollationError(f"Could not make collator for {self._locale}: {e}") from e
        _module_logger.debug(f"Collator for {self._locale}")

    ##############################################

    @property
    def locale(self) -> str:
        return self._locale

    ##############################################

    def compare(self, a: str, b: str) -> int:
        try:
            return self._collator.compare(a, b)
        except ICUError as e:
            raise CollationError(f"Failed to collate '{a}' and '{b}': {e}") from e
