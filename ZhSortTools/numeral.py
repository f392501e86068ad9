####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

"""Chinese numeral parser.

Numerals are read using the ten-thousand count method: a section lower than 10^4 is built
from the digits and the 十 百 千 markers, then multiplied by a large unit 萬 億 兆 ...  which
are powers of 10^4.

Upper-case numerals (大寫數字) are the financial glyphs 壹 貳 參 ... used on cheques.

"""

__all__ = [
    'LOWER_CASE_NUMERALS',
    'UPPER_CASE_NUMERALS',
    'NUMERALS',
    'NumeralParseError',
    'ParsedNumeral',
    'is_upper_case',
    'numeral_run_length',
    'parse_numeral',
    'parse_numeral_prefix',
]

####################################################################################################

from dataclasses import dataclass

####################################################################################################

INT64_MAX = 2**63 - 1

# Traditional and simplified glyphs
_LOWER_DIGITS = {
    '零': 0,
    '一': 1,
    '二': 2,
    '三': 3,
    '四': 4,
    '五': 5,
    '六': 6,
    '七': 7,
    '八': 8,
    '九': 9,
}

_UPPER_DIGITS = {
    '零': 0,
    '壹': 1,
    '貳': 2, '贰': 2,
    '參': 3, '参': 3,
    '肆': 4,
    '伍': 5,
    '陸': 6, '陆': 6,
    '柒': 7,
    '捌': 8,
    '玖': 9,
}

_LOWER_MARKERS = {'十': 10, '百': 100, '千': 1000}
_UPPER_MARKERS = {'拾': 10, '佰': 100, '仟': 1000}

# Shared by both cases
_LARGE_UNITS = {
    '萬': 10**4, '万': 10**4,
    '億': 10**8, '亿': 10**8,
    '兆': 10**12,
    '京': 10**16,
    '垓': 10**20,
    '秭': 10**24,
    '穰': 10**28,
    '溝': 10**32, '沟': 10**32,
    '澗': 10**36, '涧': 10**36,
    '正': 10**40,
    '載': 10**44, '载': 10**44,
    '極': 10**48, '极': 10**48,
}

LOWER_CASE_NUMERALS = frozenset(_LOWER_DIGITS) | frozenset(_LOWER_MARKERS) | frozenset(_LARGE_UNITS)
UPPER_CASE_NUMERALS = frozenset(_UPPER_DIGITS) | frozenset(_UPPER_MARKERS) | frozenset(_LARGE_UNITS)
NUMERALS = LOWER_CASE_NUMERALS | UPPER_CASE_NUMERALS

_DIGITS = {**_LOWER_DIGITS, **_UPPER_DIGITS}
_MARKERS = {**_LOWER_MARKERS, **_UPPER_MARKERS}

_ZERO = '零'
_SECTION_LIMIT = 10**4

####################################################################################################

class NumeralParseError(ValueError):
    pass

####################################################################################################

@dataclass(frozen=True)
class ParsedNumeral:
    is_upper_case: bool
    value: int
    # number of characters consumed
    length: int

####################################################################################################

def is_upper_case(text: str) -> bool:
    return bool(text) and text[0] in UPPER_CASE_NUMERALS


def numeral_run_length(text: str) -> int:
    """Return the length of the leading run of Chinese numeral glyphs"""
    for i, c in enumerate(text):
        if c not in NUMERALS:
            return i
    return len(text)

####################################################################################################

def parse_numeral(text: str) -> int:
    """Parse a Chinese numeral, the whole string must be a numeral.

    Raise :class:`NumeralParseError` if the string is not a valid numeral or if its value
    doesn't fit in a signed 64-bit integer.
    """

    if not text:
        raise NumeralParseError("Empty numeral")

    total = 0
    section = 0
    digit = None
    # place of the previous marker or large unit, None after 零
    previous_place = None
    last_marker = _SECTION_LIMIT
    last_unit = None

    def close_section() -> int:
        nonlocal digit
        _ = section
        if digit is not None:
            if previous_place is not None:
                # 一百二 = 120, 一萬二 = 12000
                _ += digit * (previous_place // 10)
            else:
                _ += digit
            digit = None
        return _

    for c in text:
        if c == _ZERO:
            if digit is not None:
                raise NumeralParseError(f"Misplaced {c} in {text}")
            previous_place = None
        elif c in _DIGITS:
            if digit is not None:
                raise NumeralParseError(f"Digit sequence without marker in {text}")
            digit = _DIGITS[c]
        elif c in _MARKERS:
            marker = _MARKERS[c]
            if marker >= last_marker:
                raise NumeralParseError(f"Misplaced {c} in {text}")
            if digit is None:
                # 十 = 10, but 百 or 千 need a coefficient
                if marker != 10:
                    raise NumeralParseError(f"{c} without coefficient in {text}")
                digit = 1
            section += digit * marker
            digit = None
            last_marker = marker
            previous_place = marker
        elif c in _LARGE_UNITS:
            unit = _LARGE_UNITS[c]
            if last_unit is not None and unit >= last_unit:
                raise NumeralParseError(f"Misplaced {c} in {text}")
            # previous_place is only meaningful for the following section
            if previous_place is not None and previous_place >= _SECTION_LIMIT:
                previous_place = None
            value = close_section()
            if value == 0:
                raise NumeralParseError(f"{c} without coefficient in {text}")
            total += value * unit
            section = 0
            last_marker = _SECTION_LIMIT
            last_unit = unit
            previous_place = unit
        else:
            raise NumeralParseError(f"{c} is not a Chinese numeral")

    total += close_section()
    if total > INT64_MAX:
        raise NumeralParseError(f"Numeral {text} overflows")
    return total

####################################################################################################

def parse_numeral_prefix(text: str, whole: bool = True) -> ParsedNumeral:
    """Parse the leading Chinese numeral of a string.

    If *whole* is set, the string must only contain the numeral.
    """
    length = numeral_run_length(text)
    if whole and length != len(text):
        raise NumeralParseError(f"{text} is not a Chinese numeral")
    value = parse_numeral(text[:length])
    return ParsedNumeral(is_upper_case(text), value, length)
