"""Tests for the label classifier."""
from __future__ import annotations

import pytest

from ZhSortTools.classifier import Category, classify, classify_label
from ZhSortTools.options import NumeralPolicy, SortOptions, UpperCaseOrder

LABELS = ["肆", "1", "一", "2", "二", "參", "正"]


def test_collation_default_has_no_numeral_bucket() -> None:
    """With the default policy non ASCII labels are generic words."""

    classification = classify(LABELS, SortOptions())
    assert classification.categories() == [
        Category.GENERIC_WORD,
        Category.ASCII_WORD,
        Category.GENERIC_WORD,
        Category.ASCII_WORD,
        Category.GENERIC_WORD,
        Category.GENERIC_WORD,
        Category.GENERIC_WORD,
    ]
    assert classification[Category.ASCII_WORD] == [(1, "1"), (3, "2")]
    assert classification[Category.LOWER_NUMERAL] == []
    assert classification[Category.UPPER_NUMERAL] == []


def test_by_value_ignores_case() -> None:
    """Upper case numerals go in the lower case bucket when case is ignored."""

    classification = classify(LABELS, SortOptions.by_value())
    assert classification[Category.LOWER_NUMERAL] == [(0, 4), (2, 1), (4, 2), (5, 3)]
    assert classification[Category.UPPER_NUMERAL] == []
    assert classification[Category.GENERIC_WORD] == [(6, "正")]


@pytest.mark.parametrize("order", list(UpperCaseOrder))
def test_by_value_with_case(order: UpperCaseOrder) -> None:
    """Upper and lower case numerals are split in two buckets."""

    classification = classify(LABELS, SortOptions.by_value_with_case(order))
    assert classification[Category.UPPER_NUMERAL] == [(0, 4), (5, 3)]
    assert classification[Category.LOWER_NUMERAL] == [(2, 1), (4, 2)]
    assert classification[Category.GENERIC_WORD] == [(6, "正")]


def test_every_label_in_one_bucket() -> None:
    labels = ["b", "", "十二測試", "壹佰", "一百", "測試", "a"]
    classification = classify(labels, SortOptions.by_value_with_case())
    indexes = sorted(i for bucket in classification.buckets.values() for i, _ in bucket)
    assert indexes == list(range(len(labels)))
    assert len(classification) == len(labels)


def test_empty_label_is_a_generic_word() -> None:
    """An empty label must not fail."""

    for options in (SortOptions(), SortOptions.by_value(), SortOptions.by_value_with_case()):
        label = classify_label(0, "", options)
        assert label.category == Category.GENERIC_WORD
        assert label.key == ""


def test_numeral_with_trailing_text() -> None:
    """A label like 十二測試 is a word, unless the numeral prefix option is set."""

    label = classify_label(0, "十二測試", SortOptions.by_value())
    assert label.category == Category.GENERIC_WORD
    assert label.numeral is None

    options = SortOptions(numeral_policy=NumeralPolicy.BY_VALUE, numeral_prefix=True)
    label = classify_label(0, "十二測試", options)
    assert label.category == Category.LOWER_NUMERAL
    assert label.key == 12


def test_ascii_first_character() -> None:
    """The first character decides, the rest of the label doesn't matter."""

    label = classify_label(3, "A測試", SortOptions.by_value())
    assert label.category == Category.ASCII_WORD
    assert label.index == 3
    assert label.key == "A測試"

    label = classify_label(0, "測試A", SortOptions.by_value())
    assert label.category == Category.GENERIC_WORD
