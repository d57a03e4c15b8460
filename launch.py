"""
launch.py - Tag Cloud Generator Entry Point

Main entry point for the tag cloud generator.
Handles configuration loading, argument parsing and
prompting for anything not given on the command line.

Usage:
    python launch.py                                  # Prompt for everything
    python launch.py --input doc.txt --output cloud.html --count 50
    python launch.py --config_file path               # Use custom config file
"""

import sys
from configparser import ConfigParser
from argparse import ArgumentParser

from tagcloud import CloudGenerator, TagCloudError, InvalidCount
from tagcloud.utils import get_logger
from tagcloud.utils.config import Config


def parse_count(value):
    """Convert user input into a word count."""
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidCount(value) from None


def prompt_missing(args, prompt=input):
    """Ask for the input file, output file and count when not passed as flags."""
    if args.input is None:
        args.input = prompt("Please enter the name of the input file: ").strip()
    if args.output is None:
        args.output = prompt("Please enter the name of the output file: ").strip()
    if args.count is None:
        args.count = prompt("Enter the number of words to include in the tag cloud: ")
    return args


def main(config_file, input_file, output_file, count, label=None):
    """
    Load configuration and generate one tag cloud.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_file: Document to read
        output_file: HTML page to write
        count: Number of words in the cloud (int or numeric string)
        label: Source name shown in the page title

    Returns:
        Process exit status: 0 on success, 1 on a reported failure
    """
    # Load configuration
    cparser = ConfigParser(interpolation=None)
    cparser.read(config_file)
    try:
        config = Config(cparser)
    except (AssertionError, ValueError) as e:
        print(f"Invalid configuration in {config_file}: {e}", file=sys.stderr)
        return 1
    logger = get_logger("LAUNCH", log_dir=config.log_dir)

    try:
        generator = CloudGenerator(config)
        generator.generate(input_file, output_file, parse_count(count), label)
    except TagCloudError as e:
        logger.error(f"Tag cloud not generated: {e}")
        return 1
    return 0


def build_parser():
    parser = ArgumentParser(description="Generate an HTML tag cloud from a text file.")
    parser.add_argument("--input", type=str, default=None,
                        help="Text or HTML document to read")
    parser.add_argument("--output", type=str, default=None,
                        help="HTML file to write")
    parser.add_argument("--count", type=str, default=None,
                        help="Number of words to include in the tag cloud")
    parser.add_argument("--label", type=str, default=None,
                        help="Source name shown in the page title (default: input path)")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    return parser


if __name__ == "__main__":
    args = prompt_missing(build_parser().parse_args())
    sys.exit(main(args.config_file, args.input, args.output, args.count, args.label))
