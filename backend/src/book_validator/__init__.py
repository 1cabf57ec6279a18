"""Text normalization and validation primitives for book catalog records."""

from book_validator.text.pages import clean_page_num, count_pages
from book_validator.text.sanitize import clean_for_html
from book_validator.text.titles import is_same_title, is_title, letter_skeleton

__all__ = [
    "clean_for_html",
    "clean_page_num",
    "count_pages",
    "is_same_title",
    "is_title",
    "letter_skeleton",
]
