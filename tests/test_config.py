from pathlib import Path

from symbex import config


def test_prelude_root_default():
    root = config.get_prelude_root()
    assert (root / "std" / "core.sx").is_file()


def test_prelude_root_file_path_uses_parent(tmp_path, monkeypatch):
    f = tmp_path / "core.sx"
    f.write_text("", encoding="utf-8")
    monkeypatch.setenv("SYMBEX_PRELUDE_PATH", str(f))
    assert config.get_prelude_root() == tmp_path


def test_paths_from_env(monkeypatch):
    monkeypatch.delenv("SYMBEX_TEST_PATHS", raising=False)
    assert config.paths_from_env("SYMBEX_TEST_PATHS", ["a"]) == [Path("a")]
    sep = config._sep()
    monkeypatch.setenv("SYMBEX_TEST_PATHS", f"x{sep} {sep}y")
    assert config.paths_from_env("SYMBEX_TEST_PATHS", []) == [Path("x"), Path("y")]


def test_reader_strict_flag(monkeypatch):
    monkeypatch.delenv("SYMBEX_READER_STRICT", raising=False)
    assert config.reader_strict() is True
    for word in ("0", "false", "No", "OFF"):
        monkeypatch.setenv("SYMBEX_READER_STRICT", word)
        assert config.reader_strict() is False
    monkeypatch.setenv("SYMBEX_READER_STRICT", "yes")
    assert config.reader_strict() is True


def test_log_level(monkeypatch):
    monkeypatch.delenv("SYMBEX_LOG_LEVEL", raising=False)
    assert config.get_log_level() == "WARNING"
    monkeypatch.setenv("SYMBEX_LOG_LEVEL", "debug")
    assert config.get_log_level() == "DEBUG"
