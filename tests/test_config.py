from avl_profiler.config import get_config
from avl_profiler.generator import DEFAULT_QUERY_LENGTH


def test_defaults(monkeypatch):
    for name in ("AVL_PROFILER_HOST", "AVL_PROFILER_PORT", "AVL_PROFILER_DEBUG",
                 "AVL_PROFILER_DEFAULT_LENGTH", "AVL_PROFILER_MAX_LENGTH", "AVL_PROFILER_SEED"):
        monkeypatch.delenv(name, raising=False)

    cfg = get_config()
    assert cfg["host"] == "127.0.0.1"
    assert cfg["port"] == 8080
    assert cfg["debug"] is False
    assert cfg["default_query_length"] == DEFAULT_QUERY_LENGTH
    assert cfg["seed"] is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("AVL_PROFILER_PORT", "9000")
    monkeypatch.setenv("AVL_PROFILER_DEBUG", "true")
    monkeypatch.setenv("AVL_PROFILER_SEED", "42")

    cfg = get_config()
    assert cfg["port"] == 9000
    assert cfg["debug"] is True
    assert cfg["seed"] == 42


def test_bad_number_falls_back(monkeypatch):
    monkeypatch.setenv("AVL_PROFILER_MAX_LENGTH", "lots")
    assert get_config()["max_query_length"] == 5000000
