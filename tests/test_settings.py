import pytest

from tristram.settings import Settings, SettingsError


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


@pytest.fixture
def files(tmp_path):
    defaults = _write(
        tmp_path / "defaults.ini",
        "[Display]\nwidth = 1280\nfullscreen = false\n[Game]\nname = town\n",
    )
    user = _write(tmp_path / "user.ini", "; comment\n[Display]\nwidth=800\n")
    return defaults, user


def test_user_value_overrides_default(files):
    settings = Settings(*files)
    assert settings.load_user_settings() is True
    assert settings.get("Display", "width", 0) == 800


def test_falls_back_to_defaults(files):
    settings = Settings(*files)
    settings.load_user_settings()
    assert settings.get("Display", "fullscreen", True) is False
    assert settings.get("Game", "name") == "town"


def test_falls_back_to_given_default(files):
    settings = Settings(*files)
    settings.load_user_settings()
    assert settings.get("Sound", "volume", 5) == 5


def test_missing_defaults_file(tmp_path):
    settings = Settings(str(tmp_path / "nope.ini"), str(tmp_path / "user.ini"))
    assert settings.load_user_settings() is False


def test_missing_user_file_is_created(tmp_path):
    defaults = _write(tmp_path / "d.ini", "[A]\nb=1\n")
    user = tmp_path / "u.ini"
    settings = Settings(defaults, str(user))
    assert settings.load_user_settings() is True
    assert user.exists()
    assert settings.get("A", "b", 0) == 1


def test_sections_and_properties(tmp_path):
    path = _write(tmp_path / "s.ini", "top=1\n[One]\na=1\nb=2\n[Two]\nc=3\n")
    settings = Settings()
    assert settings.load_from_file(path) is True
    assert settings.sections() == ["top", "One", "Two"]
    assert settings.properties_in_section("One") == ["a", "b"]
    assert settings.properties_in_section("Missing") == []
    assert settings.section_exists("Two")
    assert not settings.section_exists("Three")


def test_root_key_without_section(tmp_path):
    path = _write(tmp_path / "s.ini", "top=yes\n")
    settings = Settings()
    settings.load_from_file(path)
    assert settings.get("", "top") == "yes"


def test_set_save_and_reload(tmp_path):
    path = str(tmp_path / "new.ini")
    settings = Settings()
    assert settings.load_from_file(path) is True
    settings.set("Display", "width", 640)
    settings.set("Display", "fullscreen", True)
    settings.set("Game", "speed", 1.5)
    assert settings.save() is True

    reloaded = Settings()
    assert reloaded.load_from_file(path) is True
    assert reloaded.get("Display", "width", 0) == 640
    assert reloaded.get("Display", "fullscreen", False) is True
    assert reloaded.get("Game", "speed", 0.0) == 1.5


def test_save_without_file():
    assert Settings().save() is False


def test_bad_user_file_fails_to_load(tmp_path):
    path = _write(tmp_path / "bad.ini", "[Display\nwidth=1\n")
    assert Settings().load_from_file(path) is False


def test_duplicate_key_fails_to_load(tmp_path):
    path = _write(tmp_path / "dup.ini", "[A]\nx=1\nx=2\n")
    assert Settings().load_from_file(path) is False


def test_bad_defaults_file_raises(tmp_path):
    defaults = _write(tmp_path / "d.ini", "no equals sign here\n")
    settings = Settings(defaults, str(tmp_path / "u.ini"))
    with pytest.raises(SettingsError):
        settings.load_user_settings()


def test_unconvertible_user_value_uses_default(tmp_path):
    path = _write(tmp_path / "s.ini", "[A]\nn=abc\n")
    settings = Settings()
    settings.load_from_file(path)
    assert settings.get("A", "n", 3) == 3
    assert settings.get("A", "n") == "abc"