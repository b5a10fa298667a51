import importlib

import lrucache.config as config


def test_env_helpers_fall_back_on_missing_or_bad_values(monkeypatch):
    monkeypatch.delenv("X_INT", raising=False)
    monkeypatch.setenv("X_FLOAT", "not-a-number")
    monkeypatch.setenv("X_BOOL", " Yes ")

    assert config._env_int("X_INT", 3) == 3
    assert config._env_float("X_FLOAT", 1.5) == 1.5
    assert config._env_bool("X_BOOL", False) is True
    assert config._env_bool("X_MISSING", True) is True


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("LRU_CACHE_CAPACITY", " 64 ")
    monkeypatch.setenv("LRU_CACHE_DEFAULT_TTL", "2.5")
    monkeypatch.setenv("LRU_CACHE_THREAD_SAFE", "on")

    try:
        reloaded = importlib.reload(config)
        assert reloaded.LRU_CACHE_CAPACITY == 64
        assert reloaded.LRU_CACHE_DEFAULT_TTL == 2.5
        assert reloaded.LRU_CACHE_THREAD_SAFE is True
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_bad_capacity_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("LRU_CACHE_CAPACITY", "lots")
    monkeypatch.setenv("LRU_CACHE_THREAD_SAFE", "nope")

    try:
        reloaded = importlib.reload(config)
        assert reloaded.LRU_CACHE_CAPACITY == 128
        assert reloaded.LRU_CACHE_THREAD_SAFE is False
    finally:
        monkeypatch.undo()
        importlib.reload(config)
