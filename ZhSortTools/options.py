####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

__all__ = [
    'ChineseVariant',
    'NumeralPolicy',
    'UpperCaseOrder',
    'SortOptions',
    'ConfigError',
]

####################################################################################################

from dataclasses import dataclass
from enum import Enum

####################################################################################################

class ConfigError(NameError):
    pass

####################################################################################################

class ChineseVariant(Enum):
    TRADITIONAL = 'traditional'
    SIMPLIFIED = 'simplified'

    ##############################################

    @property
    def locale(self) -> str:
        match self:
            case ChineseVariant.TRADITIONAL:
                return 'zh-TW'
            case ChineseVariant.SIMPLIFIED:
                return 'zh-CN'

####################################################################################################

class NumeralPolicy(Enum):
    # Non ASCII labels only go through the collator
    COLLATION_DEFAULT = 'collation'
    # Chinese numerals sorted by value, case is ignored
    BY_VALUE = 'value'
    # Chinese numerals sorted by value, upper and lower case in distinct buckets
    BY_VALUE_WITH_CASE = 'value-case'

####################################################################################################

class UpperCaseOrder(Enum):
    # 壹, 貳, 一, 二
    UPPER_FIRST = 'upper-first'
    # 一, 二, 壹, 貳
    LOWER_FIRST = 'lower-first'

####################################################################################################

def _from_name(cls, value):
    if isinstance(value, cls):
        return value
    _ = str(value).strip().lower().replace('_', '-')
    for member in cls:
        if _ in (member.value, member.name.lower().replace('_', '-')):
            return member
    names = ', '.join(_.value for _ in cls)
    raise ConfigError(f"Invalid {cls.__name__} '{value}', expected one of {names}")

####################################################################################################

@dataclass(frozen=True)
class SortOptions:

    """Options of a sort call.

    `upper_case_order` is only used when `numeral_policy` is
    `NumeralPolicy.BY_VALUE_WITH_CASE`.

    When `numeral_prefix` is set, a label like "十二測試" is sorted as the numeral 12,
    else the whole label must be a Chinese numeral.
    """

    variant: ChineseVariant = ChineseVariant.TRADITIONAL
    numeral_policy: NumeralPolicy = NumeralPolicy.COLLATION_DEFAULT
    upper_case_order: UpperCaseOrder = UpperCaseOrder.LOWER_FIRST
    numeral_prefix: bool = False

    ##############################################

    @classmethod
    def by_value(cls, variant: ChineseVariant = ChineseVariant.TRADITIONAL) -> 'SortOptions':
        return cls(variant=variant, numeral_policy=NumeralPolicy.BY_VALUE)

    @classmethod
    def by_value_with_case(
            cls,
            order: UpperCaseOrder = UpperCaseOrder.LOWER_FIRST,
            variant: ChineseVariant = ChineseVariant.TRADITIONAL,
    ) -> 'SortOptions':
        return cls(
            variant=variant,
            numeral_policy=NumeralPolicy.BY_VALUE_WITH_CASE,
            upper_case_order=order,
        )

    ##############################################

    @classmethod
    def from_names(
            cls,
            variant: str = 'traditional',
            numeral_policy: str = 'collation',
            upper_case_order: str = 'lower-first',
            numeral_prefix: bool = False,
    ) -> 'SortOptions':
        return cls(
            variant=_from_name(ChineseVariant, variant),
            numeral_policy=_from_name(NumeralPolicy, numeral_policy),
            upper_case_order=_from_name(UpperCaseOrder, upper_case_order),
            numeral_prefix=bool(numeral_prefix),
        )

    ##############################################

    @property
    def locale(self) -> str:
        return self.variant.locale

    @property
    def parse_numerals(self) -> bool:
        return self.numeral_policy != NumeralPolicy.COLLATION_DEFAULT

    @property
    def split_case(self) -> bool:
        return self.numeral_policy == NumeralPolicy.BY_VALUE_WITH_CASE

    @property
    def upper_first(self) -> bool:
        return self.split_case and self.upper_case_order == UpperCaseOrder.UPPER_FIRST

    ##############################################

    def __str__(self) -> str:
        _ = f'{self.variant.value} ({self.locale}), numerals: {self.numeral_policy.value}'
        if self.split_case:
            _ += f' {self.upper_case_order.value}'
        if self.numeral_prefix:
            _ += ', prefix'
        return _
