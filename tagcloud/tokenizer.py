"""
tokenizer.py - Split text into lowercase word tokens

A token is a maximal run of characters that are not word separators.
Text is read line by line and the end of a line always closes the
current token, so no token spans two lines.
"""

from bs4 import BeautifulSoup


# Whitespace, punctuation and symbols treated as word boundaries
SEPARATORS = " \t, \n\r,.<>/?;:\"'{}[]_-+=~`!@#$%^&*()|"

# Tags whose text never shows up on a rendered page
NON_CONTENT_TAGS = ["script", "style", "noscript", "svg", "iframe",
                    "form", "meta", "link"]


def make_separator_predicate(separators):
    """Build an is_separator(char) predicate from a collection of characters."""
    separator_set = frozenset(separators)

    def is_separator(char):
        return char in separator_set

    return is_separator


is_separator = make_separator_predicate(SEPARATORS)


def tokenize_lines(lines, is_separator=is_separator):
    """
    Lazily yield lowercase tokens from an iterable of lines.

    Runtime Complexity: O(n)
    where n is the total number of characters across all lines.
    Each character is inspected exactly once.
    """
    for line in lines:
        start = -1
        for i, char in enumerate(line):
            if is_separator(char):
                if start != -1:
                    yield line[start:i].lower()
                    start = -1
            elif start == -1:
                start = i

        # End of line closes the open token
        if start != -1:
            yield line[start:].lower()


def tokenize_file(file_path, encoding="utf-8", is_separator=is_separator):
    """Yield tokens from a plain text file. File-level exceptions propagate."""
    with open(file_path, "r", encoding=encoding) as file:
        yield from tokenize_lines(file, is_separator)


def extract_visible_text(markup, encoding=None):
    """
    Return the visible text of an HTML document as a list of lines.

    Scripts, styles and other non-content tags are dropped first so
    their contents do not leak into the word counts. Only the body is
    read when the document has one. `encoding` is used to decode byte
    markup; when it is None BeautifulSoup detects it.
    """
    soup = BeautifulSoup(markup, "lxml", from_encoding=encoding)
    for tag in soup(NON_CONTENT_TAGS):
        tag.extract()

    root = soup.body or soup
    text = root.get_text(separator="\n")
    return [line for line in text.splitlines() if line.strip()]
