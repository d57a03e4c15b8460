"""
ranking.py - Pick the top-N words and order them for display

Selection happens in two separate phases:
    1. every word sorted by count, highest first
    2. the first N of those re-sorted alphabetically
The phases apply to different slices, so they stay separate functions.
"""

from typing import NamedTuple

from tagcloud.errors import InvalidCount, VocabularyTooSmall


class WordEntry(NamedTuple):
    word: str
    count: int


def get_word(entry):
    return entry.word


def get_frequency(entry):
    return entry.count


def sort_by_count(frequencies):
    """
    Return all (word, count) entries ordered by count, highest first.

    Words with equal counts are ordered alphabetically. list.sort is
    stable, so sorting by word first and then by count keeps the
    alphabetic order within each count.

    Runtime Complexity: O(n log n) where n is the number of unique words.
    """
    entries = [WordEntry(word, count) for word, count in frequencies.items()]
    entries.sort(key=get_word)
    entries.sort(key=get_frequency, reverse=True)
    return entries


def sort_alphabetically(entries):
    """Return the entries ordered by word (ordinal string order)."""
    return sorted(entries, key=get_word)


def select_top_words(frequencies, count):
    """
    Select the `count` most frequent words, ordered alphabetically.

    Args:
        frequencies: Mapping of word -> occurrence count
        count: Number of words wanted in the cloud

    Raises:
        InvalidCount: If count is negative
        VocabularyTooSmall: If count exceeds the number of unique words
    """
    if count < 0:
        raise InvalidCount(count)

    sorted_by_count = sort_by_count(frequencies)
    if count > len(sorted_by_count):
        raise VocabularyTooSmall(count, len(sorted_by_count))

    return sort_alphabetically(sorted_by_count[:count])
