import pytest

from settings import ConfigError, load_api_key


def test_load_api_key_trims_value(tmp_path):
    path = tmp_path / "youtube.properties"
    path.write_text("# API key\nyoutube.apikey=  AIzaTestKey1234  \n", encoding="utf-8")

    assert load_api_key(str(path)) == "AIzaTestKey1234"


def test_load_api_key_blank_value(tmp_path):
    path = tmp_path / "youtube.properties"
    path.write_text("youtube.apikey=\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="youtube.apikey"):
        load_api_key(str(path))


def test_load_api_key_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_api_key(str(tmp_path / "missing.properties"))


def test_config_error_is_io_error():
    assert issubclass(ConfigError, OSError)
