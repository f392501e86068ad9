####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

"""Sort a list of labels in a Chinese aware order.

If we simply use :func:`sorted`, Chinese characters are sorted by their Unicode code point,
which is meaningless for a reader.

Labels are classified in buckets that are sorted independently, then concatenated in this
order: ASCII words, Chinese numerals, other words.  Other words are sorted using the ICU
collator for zh-TW (stroke count) or zh-CN (pinyin).

"""

__all__ = ['sort_zh', 'sort_permutation', 'sort_buckets']

####################################################################################################

from functools import cmp_to_key
from typing import Iterable
import logging

from .classifier import Bucket, Category, Classification, classify
from .collation import CollationService
from .options import NumeralPolicy, SortOptions, UpperCaseOrder

####################################################################################################

_module_logger = logging.getLogger(__name__)

####################################################################################################

def _indexes(bucket: Bucket) -> list[int]:
    return [i for i, _ in bucket]

# sorted() is stable, ties keep their input order

def sort_ascii_words(bucket: Bucket) -> list[int]:
    # code point order is the byte order for ASCII
    return _indexes(sorted(bucket, key=lambda _: _[1]))


def sort_numerals(bucket: Bucket) -> list[int]:
    return _indexes(sorted(bucket, key=lambda _: _[1]))


def sort_words(bucket: Bucket, collator: CollationService) -> list[int]:
    key = cmp_to_key(collator.compare)
    return _indexes(sorted(bucket, key=lambda _: key(_[1])))

####################################################################################################

def sort_buckets(
        classification: Classification,
        options: SortOptions,
        collator: CollationService,
) -> list[int]:
    """Sort each bucket and concatenate them, return a permutation of the label indexes"""
    permutation = sort_ascii_words(classification[Category.ASCII_WORD])
    upper = sort_numerals(classification[Category.UPPER_NUMERAL])
    lower = sort_numerals(classification[Category.LOWER_NUMERAL])
    match options.numeral_policy:
        case NumeralPolicy.BY_VALUE_WITH_CASE:
            match options.upper_case_order:
                case UpperCaseOrder.UPPER_FIRST:
                    permutation += upper + lower
                case UpperCaseOrder.LOWER_FIRST:
                    permutation += lower + upper
        case NumeralPolicy.BY_VALUE | NumeralPolicy.COLLATION_DEFAULT:
            # the upper case bucket is always empty
            permutation += lower
    permutation += sort_words(classification[Category.GENERIC_WORD], collator)
    return permutation

####################################################################################################

def sort_permutation(
        labels: Iterable[str],
        options: SortOptions = None,
        collator: CollationService = None,
) -> list[int]:
    if options is None:
        options = SortOptions()
    classification = classify(labels, options)
    if collator is None:
        collator = CollationService.for_variant(options.variant)
    if _module_logger.isEnabledFor(logging.DEBUG):
        sizes = ', '.join(f'{_.value} {len(classification[_])}' for _ in Category)
        _module_logger.debug(f"Sort {len(classification)} labels with {options}: {sizes}")
    return sort_buckets(classification, options, collator)

####################################################################################################

def sort_zh(
        labels: Iterable[str],
        options: SortOptions = None,
        collator: CollationService = None,
) -> list[str]:
    """Return the labels sorted in a Chinese aware order.

    Raise :class:`CollationError` if the collator fails, a partial result is never returned.
    """
    labels = list(labels)
    permutation = sort_permutation(labels, options, collator)
    return [labels[_] for _ in permutation]
