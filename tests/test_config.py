import pytest

from slackbot.config import Config, load_config


def test_round_trip(tmp_path):
    url = "https://hooks.example.com/services/placeholder"
    path = tmp_path / "config.yml"
    path.write_text(f"webhook: {url}\n", encoding="utf-8")
    assert load_config(path) == Config(webhook=url)


def test_accepts_string_path(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("webhook: http://localhost/hook\n", encoding="utf-8")
    assert load_config(str(path)).webhook == "http://localhost/hook"


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("webhook: http://localhost/a\nchannel: general\n", encoding="utf-8")
    assert load_config(path) == Config(webhook="http://localhost/a")


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).webhook == ""


def test_missing_webhook_gives_default(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("other: 1\n", encoding="utf-8")
    assert load_config(path) == Config()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_non_mapping_raises(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("webhook: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_structured_webhook_raises(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("webhook:\n  url: x\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)