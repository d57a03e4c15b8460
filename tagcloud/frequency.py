"""
frequency.py - Word occurrence counting
"""


def compute_word_frequencies(tokens):
    """
    Map each distinct token to the number of times it appears.

    Consumes the token iterable once; absent words start from zero.
    """
    frequencies = {}
    for token in tokens:
        frequencies[token] = frequencies.get(token, 0) + 1
    return frequencies
