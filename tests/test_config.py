import pytest

from commitui.config import (
    Config,
    ConfigError,
    default_scopes,
    default_subject_max_length,
    default_subject_no_ending_period,
    default_subject_start_lowercase,
    default_types,
    global_config_path,
)


def test_default_config_uses_default_functions():
    config = Config.default()
    assert config.types == default_types()
    assert config.scopes == default_scopes()
    assert config.subject_max_length == default_subject_max_length() == 72
    assert config.subject_start_lowercase is default_subject_start_lowercase() is True
    assert config.subject_no_ending_period is default_subject_no_ending_period() is True


def test_default_lists_content():
    assert default_types()[0] == "feat"
    assert "revert" in default_types()
    scopes = default_scopes()
    assert scopes[0] == "no scope"
    assert scopes[10].startswith("─")
    assert scopes[-1] == "example"


def test_default_lists_are_fresh_copies():
    first = default_types()
    first.append("extra")
    assert "extra" not in default_types()


def test_empty_config_has_no_fields_set():
    config = Config()
    assert all(
        value is None
        for value in (
            config.types,
            config.scopes,
            config.subject_max_length,
            config.subject_start_lowercase,
            config.subject_no_ending_period,
        )
    )


def test_merge_overrides_only_set_fields():
    base = Config.default()
    base.merge(Config(types=["one", "two"], subject_start_lowercase=False))
    assert base.types == ["one", "two"]
    assert base.subject_start_lowercase is False
    assert base.scopes == default_scopes()
    assert base.subject_max_length == 72
    assert base.subject_no_ending_period is True


def test_merge_with_empty_config_changes_nothing():
    base = Config.default()
    base.merge(Config())
    assert base == Config.default()


def test_from_toml_partial():
    config = Config.from_toml('types = ["a", "b"]\nsubject_max_length = 50\n')
    assert config == Config(types=["a", "b"], subject_max_length=50)


def test_from_toml_ignores_unknown_keys():
    config = Config.from_toml('unknown = 3\nsubject_no_ending_period = false\n')
    assert config == Config(subject_no_ending_period=False)


@pytest.mark.parametrize(
    "text",
    [
        'types = "feat"',
        "types = [1, 2]",
        "scopes = 5",
        "subject_max_length = -1",
        "subject_max_length = true",
        'subject_max_length = "72"',
        "subject_start_lowercase = 1",
        "types = [",
    ],
)
def test_from_toml_rejects_bad_input(text):
    with pytest.raises(ConfigError):
        Config.from_toml(text)


def test_load_without_files_gives_defaults(tmp_path):
    config = Config.load(tmp_path / "missing.toml", [tmp_path / "nope.toml"])
    assert config == Config.default()


def test_load_merges_global(tmp_path):
    global_file = tmp_path / "global.toml"
    global_file.write_text('scopes = ["x", "y"]\n', encoding="utf-8")
    config = Config.load(global_file, [])
    assert config.scopes == ["x", "y"]
    assert config.types == default_types()


def test_local_overrides_global(tmp_path):
    global_file = tmp_path / "global.toml"
    global_file.write_text("subject_max_length = 40\nsubject_start_lowercase = false\n")
    local_file = tmp_path / "local.toml"
    local_file.write_text("subject_max_length = 60\n")
    config = Config.load(global_file, [local_file])
    assert config.subject_max_length == 60
    assert config.subject_start_lowercase is False


def test_load_stops_at_first_valid_local(tmp_path):
    first = tmp_path / "first.toml"
    first.write_text('types = ["first"]\n')
    second = tmp_path / "second.toml"
    second.write_text('scopes = ["second"]\n')
    config = Config.load(tmp_path / "missing.toml", [first, second])
    assert config.types == ["first"]
    assert config.scopes == default_scopes()


def test_load_skips_unparsable_local_with_warning(tmp_path, capsys):
    bad = tmp_path / "bad.toml"
    bad.write_text("types = [\n")
    good = tmp_path / "good.toml"
    good.write_text('types = ["good"]\n')
    config = Config.load(tmp_path / "missing.toml", [bad, good])
    assert config.types == ["good"]
    err = capsys.readouterr().err
    assert "Could not parse local config" in err
    assert str(bad) in err


def test_load_warns_on_bad_global_and_keeps_defaults(tmp_path, capsys):
    global_file = tmp_path / "global.toml"
    global_file.write_text("subject_max_length = 'long'\n")
    config = Config.load(global_file, [])
    assert config == Config.default()
    assert "Could not parse global config" in capsys.readouterr().err


def test_global_config_path_names_app_file():
    assert global_config_path().parts[-2:] == ("commiTUI", "config.toml")