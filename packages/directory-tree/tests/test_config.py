from directory_tree.config import Settings


def test_defaults(monkeypatch):
    for name in ("DIRECTORY_TREE_LOG_LEVEL", "DIRECTORY_TREE_STRICT_ROOT", "DIRECTORY_TREE_SORT_ENTRIES"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.strict_root is True
    assert settings.sort_entries is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DIRECTORY_TREE_STRICT_ROOT", "false")
    monkeypatch.setenv("DIRECTORY_TREE_LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.strict_root is False
    assert settings.log_level == "DEBUG"
