####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

__all__ = ['Category', 'Label', 'Classification', 'classify', 'classify_label']

####################################################################################################

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .numeral import NumeralParseError, ParsedNumeral, parse_numeral_prefix
from .options import SortOptions

####################################################################################################

type SortKey = str | int
type Bucket = list[tuple[int, SortKey]]

####################################################################################################

class Category(Enum):
    ASCII_WORD = 'ascii'
    UPPER_NUMERAL = 'upper numeral'
    LOWER_NUMERAL = 'lower numeral'
    GENERIC_WORD = 'word'

####################################################################################################

@dataclass(frozen=True)
class Label:
    index: int
    text: str
    category: Category
    numeral: ParsedNumeral | None = None

    ##############################################

    @property
    def key(self) -> SortKey:
        if self.numeral is not None:
            return self.numeral.value
        return self.text

####################################################################################################

@dataclass
class Classification:
    labels: list[Label] = field(default_factory=list)
    buckets: dict[Category, Bucket] = field(
        default_factory=lambda: {_: [] for _ in Category}
    )

    ##############################################

    def add(self, label: Label) -> None:
        self.labels.append(label)
        self.buckets[label.category].append((label.index, label.key))

    ##############################################

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, category: Category) -> Bucket:
        return self.buckets[category]

    def categories(self) -> list[Category]:
        return [_.category for _ in self.labels]

####################################################################################################

def _is_ascii(c: str) -> bool:
    return ord(c) < 0x80


def classify_label(index: int, text: str, options: SortOptions) -> Label:
    if text and _is_ascii(text[0]):
        return Label(index, text, Category.ASCII_WORD)
    # An empty label is collated as an empty string
    if not text or not options.parse_numerals:
        return Label(index, text, Category.GENERIC_WORD)
    try:
        numeral = parse_numeral_prefix(text, whole=not options.numeral_prefix)
    except NumeralParseError:
        return Label(index, text, Category.GENERIC_WORD)
    if options.split_case and numeral.is_upper_case:
        category = Category.UPPER_NUMERAL
    else:
        category = Category.LOWER_NUMERAL
    return Label(index, text, category, numeral)

####################################################################################################

def classify(labels: Iterable[str], options: SortOptions) -> Classification:
    classification = Classification()
    for i, text in enumerate(labels):
        classification.add(classify_label(i, str(text), options))
    return classification
