"""
tagcloud - Tag Cloud Generator

Coordinates the pipeline that turns a text document into an HTML tag cloud:
- Tokenize the input and count word frequencies
- Select the top-N words (by count, then alphabetically)
- Map counts onto font sizes
- Render and write the page

Key role: High-level coordinator that ties the pipeline stages together
"""

from tagcloud.utils import get_logger
from tagcloud.errors import (
    TagCloudError, InvalidCount, VocabularyTooSmall, InputUnavailable, OutputUnwritable)
from tagcloud.tokenizer import is_separator, tokenize_lines, tokenize_file, extract_visible_text
from tagcloud.frequency import compute_word_frequencies
from tagcloud.ranking import WordEntry, select_top_words
from tagcloud.sizing import SizedEntry, map_sizes
from tagcloud.renderer import render_cloud, write_cloud


HTML_SUFFIXES = (".html", ".htm")


class CloudGenerator(object):
    """
    Single-run tag cloud pipeline.

    Nothing is kept between runs: the frequency map, ranked list and
    sized list all live only inside one call to generate().
    """

    def __init__(self, config, is_separator=is_separator):
        """
        Initialize the generator.

        Args:
            config: Config object (font range, stylesheets, encoding, logging)
            is_separator: Word boundary predicate (swappable for testing)
        """
        self.config = config
        self.logger = get_logger("GENERATOR", log_dir=config.log_dir)
        self.is_separator = is_separator

    def _is_html(self, input_path):
        if self.config.html_input == "auto":
            return str(input_path).lower().endswith(HTML_SUFFIXES)
        return self.config.html_input == "yes"

    def count_words(self, input_path):
        """
        Tokenize a document and count its words.

        Raises:
            InputUnavailable: If the file cannot be opened, read or decoded
                (including an unknown ENCODING)
        """
        try:
            if self._is_html(input_path):
                with open(input_path, "rb") as f:
                    lines = extract_visible_text(f.read(), self.config.encoding)
                tokens = tokenize_lines(lines, self.is_separator)
            else:
                tokens = tokenize_file(input_path, self.config.encoding, self.is_separator)
            # tokens are lazy, so read errors surface while counting
            frequencies = compute_word_frequencies(tokens)
        except (OSError, LookupError, UnicodeDecodeError) as e:
            raise InputUnavailable(input_path, e) from e

        self.logger.info(
            f"Counted {sum(frequencies.values())} words "
            f"({len(frequencies)} unique) in {input_path}.")
        return frequencies

    def build(self, frequencies, count):
        """
        Select the top `count` words and size them for display.

        Raises:
            InvalidCount: If count is negative
            VocabularyTooSmall: If count exceeds the number of unique words
        """
        selected = select_top_words(frequencies, count)
        return map_sizes(selected, self.config.font_min, self.config.font_max)

    def generate(self, input_path, output_path, count, label=None):
        """
        Run the whole pipeline and write the tag cloud page.

        The page is rendered and encoded before the output file is opened,
        so selection, input and encoding errors never create an output file.
        Characters the configured encoding lacks become HTML character
        references.

        Args:
            input_path: Text (or HTML) document to read
            output_path: Where the HTML page is written
            count: Number of words in the cloud
            label: Source name shown in the page title, defaults to input_path

        Returns:
            The SizedEntry list that was rendered
        """
        frequencies = self.count_words(input_path)
        entries = self.build(frequencies, count)

        html = render_cloud(
            entries, count, input_path if label is None else label, self.config.stylesheets)

        try:
            write_cloud(output_path, html, self.config.encoding)
        except (OSError, LookupError, UnicodeError) as e:
            raise OutputUnwritable(output_path, e) from e

        self.logger.info(f"Wrote top {count} words to {output_path}.")
        return entries


__all__ = [
    "CloudGenerator", "WordEntry", "SizedEntry",
    "TagCloudError", "InvalidCount", "VocabularyTooSmall", "InputUnavailable", "OutputUnwritable",
]
