import pytest

from json_inspector.config import CONFIG_ENV_VAR, MAX_INPUT_BYTES, InspectorConfig, config_from_dict, load_config


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults_without_a_config_file(isolated):
    config = load_config()

    assert config == InspectorConfig()
    assert config.max_input_bytes == MAX_INPUT_BYTES == 10_485_760
    assert config.top_values == 10


def test_yaml_file_overrides_defaults(isolated):
    path = isolated / "settings.yaml"
    path.write_text(
        "max_input_bytes: 2048\n"
        "indent_size: 4\n"
        "logging:\n"
        "  level: debug\n"
        "  file: logs/out.log\n",
        encoding="utf-8",
    )

    config = load_config(str(path))

    assert config.max_input_bytes == 2048
    assert config.indent_size == 4
    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/out.log"
    assert config.preview_length == 1000


def test_environment_variable_points_at_the_file(isolated, monkeypatch):
    path = isolated / "env.yaml"
    path.write_text("top_values: 3\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().top_values == 3


def test_config_yaml_in_working_directory_is_picked_up(isolated):
    (isolated / "config.yaml").write_text("preview_length: 80\n", encoding="utf-8")

    assert load_config().preview_length == 80


def test_empty_file_means_defaults(isolated):
    path = isolated / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == InspectorConfig()


def test_unknown_keys_are_ignored(caplog):
    config = config_from_dict({"top_values": 5, "colour": "blue"})

    assert config.top_values == 5
    assert "colour" in caplog.text


@pytest.mark.parametrize(
    "raw",
    [
        {"max_input_bytes": "big"},
        {"top_values": -1},
        {"indent_size": True},
        {"log_level": 10},
        {"logging": "DEBUG"},
    ],
)
def test_invalid_values_raise(raw):
    with pytest.raises(ValueError):
        config_from_dict(raw)


def test_non_mapping_file_is_rejected(isolated):
    path = isolated / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(str(path))
