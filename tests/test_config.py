from pathlib import Path

import pytest

from dep_update_detector.config import (
    CheckerConfig,
    load_config_file,
    load_from_env,
    merge_config,
    parse_repository,
)


def test_load_from_env():
    config = load_from_env(
        {
            "GITHUB_TOKEN": "tok",
            "GITHUB_REPOSITORY": "acme/demo",
            "GITHUB_REF": "main",
            "LOG_LEVEL": "DEBUG",
        }
    )
    assert config.github_token == "tok"
    assert config.repository == "acme/demo"
    assert config.ref == "main"
    assert config.local_path is None
    assert config.log_level == "DEBUG"
    assert config.api_url is None


def test_load_from_env_defaults():
    assert load_from_env({}) == CheckerConfig()


def test_load_config_file(tmp_path: Path):
    path = tmp_path / "settings.yml"
    path.write_text("local_path: /srv/checkout\nlog_level: WARNING\ngithub_api_url: https://ghe.example/api/v3\n")

    config = load_config_file(path)
    assert config.local_path == Path("/srv/checkout")
    assert config.log_level == "WARNING"
    assert config.api_url == "https://ghe.example/api/v3"


def test_load_config_file_missing_or_empty(tmp_path: Path):
    assert load_config_file(tmp_path / "absent.yml") == CheckerConfig()
    empty = tmp_path / "empty.yml"
    empty.write_text("")
    assert load_config_file(empty) == CheckerConfig()


def test_load_config_file_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config_file(path)


def test_merge_config_override_wins_over_base():
    base = CheckerConfig(github_token="tok", repository="acme/demo", log_level="DEBUG")
    override = CheckerConfig(repository="other/repo", ref="dev")

    merged = merge_config(base, override)
    assert merged.github_token == "tok"
    assert merged.repository == "other/repo"
    assert merged.ref == "dev"
    assert merged.log_level == "DEBUG"
    assert merge_config(base, None) is base


@pytest.mark.parametrize(
    "value, expected",
    [
        ("acme/demo", ("acme", "demo")),
        (" acme/demo/ ", ("acme", "demo")),
    ],
)
def test_parse_repository(value, expected):
    assert parse_repository(value) == expected


@pytest.mark.parametrize("value", ["", "acme", "acme/demo/extra", "/demo", "acme/ "])
def test_parse_repository_invalid(value):
    with pytest.raises(ValueError, match="owner/repo"):
        parse_repository(value)


def test_load_config_file_rejects_malformed_yaml(tmp_path: Path):
    path = tmp_path / "broken.yml"
    path.write_text("local_path: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config file"):
        load_config_file(path)


def test_explicit_default_value_still_overrides():
    env = load_from_env({"LOG_LEVEL": "DEBUG", "GITHUB_API_URL": "https://ghe.example/api/v3"})
    override = CheckerConfig(log_level="INFO", api_url="https://api.github.com")

    merged = merge_config(env, override)
    assert merged.log_level == "INFO"
    assert merged.api_url == "https://api.github.com"
