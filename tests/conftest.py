from configparser import ConfigParser

import pytest

from tagcloud.utils.config import Config


@pytest.fixture
def make_config(tmp_path):
    """Build a Config logging under tmp_path, with extra LOCAL PROPERTIES."""
    def factory(**local_properties):
        values = {"LOGDIR": str(tmp_path / "Logs")}
        values.update(local_properties)
        cparser = ConfigParser(interpolation=None)
        cparser.read_dict({"LOCAL PROPERTIES": values})
        return Config(cparser)

    return factory


@pytest.fixture
def config(make_config):
    return make_config()


@pytest.fixture
def sample_text():
    return "the cat sat on the mat the cat ran"
