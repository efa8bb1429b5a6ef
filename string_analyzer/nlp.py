import re
import logging

from string_analyzer.schemas import MAX_SQL_INTEGER, StringFilters

logger = logging.getLogger(__name__)

WORD_COUNT_PATTERN = re.compile(r"(\d+) words?")
LONGER_THAN_PATTERN = re.compile(r"longer than (\d+)")
CONTAINS_LETTER_PATTERN = re.compile(r"contain(?:ing)? the letter (\w)")


def _bounded_int(digits: str) -> int:
    """Parse a run of digits, clamped to the largest integer the store can bind"""
    if len(digits.lstrip("0")) > len(str(MAX_SQL_INTEGER)):
        return MAX_SQL_INTEGER
    return min(int(digits), MAX_SQL_INTEGER)


def parse_natural_language_query(query: str) -> StringFilters:
    """
    Translate a natural language query into filter parameters.

    Only literal phrases are recognised; anything else is ignored, so an
    unrecognised query produces an empty filter set that matches everything.
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
    """
    text = query.lower()
    filters = StringFilters()

    if "palindromic" in text:
        filters.is_palindrome = True

    if "single word" in text:
        filters.word_count = 1

    # An explicit count wins over "single word"
    word_count_match = WORD_COUNT_PATTERN.search(text)
    if word_count_match:
        filters.word_count = _bounded_int(word_count_match.group(1))

    length_match = LONGER_THAN_PATTERN.search(text)
    if length_match:
        filters.min_length = min(_bounded_int(length_match.group(1)) + 1, MAX_SQL_INTEGER)

    letter_match = CONTAINS_LETTER_PATTERN.search(text)
    if letter_match:
        filters.contains_character = letter_match.group(1)

    logger.info(f"Interpreted query {query!r} as {filters.applied()}")
    return filters
