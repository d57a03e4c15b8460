"""
sizing.py - Map word counts onto font sizes

The least frequent selected word gets FONT_MIN, the most frequent
gets FONT_MAX, everything else is scaled linearly in between.
"""

from typing import NamedTuple


FONT_MIN = 11
FONT_MAX = 48


class SizedEntry(NamedTuple):
    word: str
    count: int
    size: int


def map_sizes(entries, font_min=FONT_MIN, font_max=FONT_MAX):
    """
    Attach a font size to every (word, count) entry, keeping input order.

    size = floor((count - min_count) * scale) + font_min
    scale = (font_max - font_min) / (max_count - min_count)

    The floor is taken with integer arithmetic so the largest count
    always lands exactly on font_max.

    When every entry has the same count the scale is taken as 0,
    so all words get font_min.
    """
    if font_min > font_max:
        raise ValueError(f"font_min {font_min} is greater than font_max {font_max}")

    entries = list(entries)
    if not entries:
        return []

    counts = [entry.count for entry in entries]
    max_count = max(counts)
    min_count = min(counts)

    if max_count == min_count:
        return [SizedEntry(entry.word, entry.count, font_min) for entry in entries]

    font_span = font_max - font_min
    count_span = max_count - min_count
    return [
        SizedEntry(entry.word, entry.count, (entry.count - min_count) * font_span // count_span + font_min)
        for entry in entries
    ]
