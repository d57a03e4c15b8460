from argparse import Namespace

import pytest

import launch
from tagcloud import InvalidCount


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[LOCAL PROPERTIES]\n"
        f"LOGDIR = {tmp_path / 'Logs'}\n",
        encoding="utf-8")
    return str(path)


@pytest.fixture
def input_file(tmp_path, sample_text):
    path = tmp_path / "sample.txt"
    path.write_text(sample_text, encoding="utf-8")
    return str(path)


def test_parse_count():
    assert launch.parse_count(" 12 ") == 12
    assert launch.parse_count(3) == 3
    with pytest.raises(InvalidCount):
        launch.parse_count("a dozen")


def test_prompts_only_for_missing_values():
    answers = iter(["out.html ", "5"])
    asked = []

    def prompt(message):
        asked.append(message)
        return next(answers)

    args = Namespace(input="in.txt", output=None, count=None)
    args = launch.prompt_missing(args, prompt)

    assert (args.input, args.output, args.count) == ("in.txt", "out.html", "5")
    assert asked == [
        "Please enter the name of the output file: ",
        "Enter the number of words to include in the tag cloud: ",
    ]


def test_parser_defaults():
    args = launch.build_parser().parse_args([])
    assert args.config_file == "config.ini"
    assert args.input is None
    assert args.count is None


def test_main_success(config_file, input_file, tmp_path):
    output = tmp_path / "cloud.html"
    assert launch.main(config_file, input_file, str(output), "3", "sample") == 0
    assert "Top 3 words in sample" in output.read_text(encoding="utf-8")


@pytest.mark.parametrize("count", ["7", "-1", "three"])
def test_main_reports_failures(config_file, input_file, tmp_path, count):
    output = tmp_path / "cloud.html"
    assert launch.main(config_file, input_file, str(output), count) == 1
    assert not output.exists()


def test_main_missing_input(config_file, tmp_path):
    output = tmp_path / "cloud.html"
    assert launch.main(config_file, str(tmp_path / "nope.txt"), str(output), "1") == 1
    assert not output.exists()


@pytest.mark.parametrize("cloud_section", [
    "FONTMIN = 50\nFONTMAX = 10\n",
    "FONTMIN = small\n",
])
def test_main_reports_bad_config(tmp_path, input_file, capsys, cloud_section):
    path = tmp_path / "bad.ini"
    path.write_text("[CLOUD]\n" + cloud_section, encoding="utf-8")
    output = tmp_path / "cloud.html"

    assert launch.main(str(path), input_file, str(output), "1") == 1
    assert "Invalid configuration" in capsys.readouterr().err
    assert not output.exists()


def test_main_unencodable_label(tmp_path, input_file):
    path = tmp_path / "latin.ini"
    path.write_text(
        "[LOCAL PROPERTIES]\n"
        "ENCODING = latin-1\n"
        f"LOGDIR = {tmp_path / 'Logs'}\n",
        encoding="utf-8")
    output = tmp_path / "cloud.html"

    assert launch.main(str(path), input_file, str(output), "2", "€ report") == 0
    assert "&#8364; report" in output.read_bytes().decode("latin-1")
