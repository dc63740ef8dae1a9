import pytest

from partitionwm.config.settings import KeymapVariant, Settings, load_settings, settings_from_mapping
from partitionwm.core.errors import ConfigError


def test_defaults():
    settings = Settings()
    assert settings.keymap_variant is KeymapVariant.DIAGONAL
    assert settings.alert_duration_seconds == 0.5


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "absent.yaml") == Settings()


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "partitionwm.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_load_values(tmp_path):
    path = tmp_path / "partitionwm.yaml"
    path.write_text("keymap_variant: Classic\nalert_duration_seconds: 1.25\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.keymap_variant is KeymapVariant.CLASSIC
    assert settings.alert_duration_seconds == 1.25


def test_partial_mapping_keeps_defaults():
    settings = settings_from_mapping({"alert_duration_seconds": 2})
    assert settings.keymap_variant is KeymapVariant.DIAGONAL
    assert settings.alert_duration_seconds == 2.0


def test_unknown_keys_are_ignored(caplog):
    with caplog.at_level("WARNING"):
        settings = settings_from_mapping({"theme": "dark"})
    assert settings == Settings()
    assert "theme" in caplog.text


@pytest.mark.parametrize(
    "data",
    [
        {"keymap_variant": "qwerty"},
        {"alert_duration_seconds": -1},
        {"alert_duration_seconds": "soon"},
        {"alert_duration_seconds": True},
        {"alert_duration_seconds": None},
    ],
)
def test_invalid_values(data):
    with pytest.raises(ConfigError):
        settings_from_mapping(data)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "partitionwm.yaml"
    path.write_text("keymap_variant: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_top_level_must_be_a_mapping(tmp_path):
    path = tmp_path / "partitionwm.yaml"
    path.write_text("- classic\n- diagonal\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)


@pytest.mark.parametrize("raw", [float("inf"), float("-inf"), float("nan"), "inf", "nan"])
def test_duration_must_be_finite(raw):
    with pytest.raises(ConfigError):
        settings_from_mapping({"alert_duration_seconds": raw})


def test_yaml_infinity_is_rejected(tmp_path):
    path = tmp_path / "partitionwm.yaml"
    path.write_text("alert_duration_seconds: .inf\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_directory_instead_of_file(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path)
