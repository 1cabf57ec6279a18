import pytest

from book_validator.text.pages import MAX_SAFE_INTEGER, clean_page_num, count_pages


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("1", 1),
        ("p3", 1),
        ("1-2", 2),
        ("10-100", 91),
        ("1-3,5-6,9", 6),
        ("1-3,5-6,p9", 6),
    ],
)
def test_print_dialog_examples(expression, expected):
    assert count_pages(expression) == expected


def test_descending_range_is_positive():
    """A range that goes down still counts, inclusively."""
    assert count_pages("5-1") == 5
    assert count_pages("p10-p1") == 10


def test_single_page_range():
    assert count_pages("7-7") == 1


def test_whitespace_ignored(sample_page_expression):
    assert count_pages(sample_page_expression) == 6
    assert count_pages(" 1 0 - 1 0 0 ") == 91
    assert count_pages("1-3,\t5-6,\np9") == 6


@pytest.mark.parametrize(
    "expression",
    ["abc", "1-2-3", "p", "", ",", "1,", "1-", "-1", "1--2", "3p", "1-3,x", "p3p4", "1.5", "+3"],
)
def test_malformed_expression_is_zero(expression):
    assert count_pages(expression) == 0


def test_one_bad_element_rejects_whole_expression():
    """No partial count: the valid elements before the bad one are discarded."""
    assert count_pages("1-100,200-300,oops") == 0


def test_over_length_is_undefined():
    assert count_pages("x" * 1001) is None
    assert count_pages("1," * 500 + "1") is None


def test_length_limit_is_inclusive():
    expression = "1," * 499 + "10"  # exactly 1000 chars
    assert len(expression) == 1000
    assert count_pages(expression) == 500


def test_total_beyond_safe_integer_is_undefined():
    assert count_pages(f"1-{MAX_SAFE_INTEGER}") == MAX_SAFE_INTEGER
    assert count_pages(f"0-{MAX_SAFE_INTEGER}") is None
    assert count_pages(f"1-{MAX_SAFE_INTEGER},1") is None


def test_non_string_is_zero():
    assert count_pages(None) == 0
    assert count_pages(12) == 0


def test_configured_length_limit(monkeypatch):
    from book_validator.config import settings

    monkeypatch.setattr(settings, "max_page_expression_length", 5)
    assert count_pages("1-100") == 100
    assert count_pages("1-1000") is None


@pytest.mark.parametrize(
    "token, expected",
    [
        ("7", 7),
        ("p7", 7),
        ("  p 7 ", 7),
        ("007", 7),
        ("p0", 0),
        ("1 2", 12),
    ],
)
def test_clean_page_num(token, expected):
    assert clean_page_num(token) == expected


@pytest.mark.parametrize("token", ["p", "", "   ", "7p", "3p4", "p3p4", "P3", "x7", "٣", "-1", "+1"])
def test_clean_page_num_rejects(token):
    assert clean_page_num(token) is None


def test_length_counted_in_utf16_units():
    """Characters outside the BMP count twice toward the length limit."""
    assert count_pages("😀" * 500) == 0
    assert count_pages("😀" * 501) is None


def test_byte_order_mark_is_whitespace():
    assert clean_page_num("\ufeff1") == 1
    assert count_pages("\ufeff1-3") == 3
