from utils import app_config
from utils.currency import format_currency, format_percentage


def test_missing_config_is_empty(tmp_path):
    assert app_config.load_config(tmp_path / "none.json") == {}


def test_corrupt_config_is_empty(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{oops", encoding="utf-8")
    assert app_config.load_config(path) == {}


def test_data_folder_round_trip(tmp_path):
    path = tmp_path / "cfg" / "config.json"
    assert app_config.get_data_folder(path) == str(path.parent)
    app_config.set_data_folder("/data/rei", path)
    assert app_config.get_data_folder(path) == "/data/rei"
    assert not path.with_suffix(".tmp").exists()
    app_config.set_data_folder(None, path)
    assert app_config.get_data_folder(path) == str(path.parent)


def test_log_level(tmp_path):
    path = tmp_path / "config.json"
    assert app_config.get_log_level(path) == "INFO"
    app_config.save_config({"log_level": "debug"}, path)
    assert app_config.get_log_level(path) == "DEBUG"


def test_currency_formatting():
    assert format_currency(1234.5) == "₹1,234.50"
    assert format_currency(3, "$") == "$3.00"
    assert format_percentage(40) == "40.0%"
