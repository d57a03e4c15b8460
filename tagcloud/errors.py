"""
errors.py - Failures that abort a tag cloud run

Every error is terminal: the run stops and no output file is written.
"""


class TagCloudError(Exception):
    """Base class for errors reported to the user."""


class InvalidCount(TagCloudError, ValueError):
    """The requested number of words is negative or not a number."""

    def __init__(self, count):
        self.count = count
        super().__init__(f"Invalid number: {count!r}.")


class VocabularyTooSmall(TagCloudError, ValueError):
    """More words were requested than the input contains."""

    def __init__(self, count, vocabulary_size):
        self.count = count
        self.vocabulary_size = vocabulary_size
        super().__init__(
            f"The input number is out of bounds! There are only "
            f"{vocabulary_size} unique words in the file.")


class InputUnavailable(TagCloudError):
    """The input document could not be opened or read."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Error reading input file {path}: {reason}")


class OutputUnwritable(TagCloudError):
    """The output document could not be created or written."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Error writing output file {path}: {reason}")
