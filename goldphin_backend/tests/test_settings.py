import os

from goldphin_backend.settings import get_settings, load_env_file


def test_defaults(monkeypatch):
    for k in ("PORT", "HOST", "LOG_LEVEL", "HTTP_TIMEOUT", "MAX_BODY_BYTES"):
        monkeypatch.delenv(k, raising=False)
    s = get_settings()
    assert s["PORT"] == 3000
    assert s["HOST"] == "0.0.0.0"
    assert s["LOG_LEVEL"] == "INFO"
    assert s["HTTP_TIMEOUT"] == 60.0
    assert s["MAX_BODY_BYTES"] == 10 * 1024 * 1024


def test_env_overrides_and_bad_numbers(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("HTTP_TIMEOUT", "soon")
    monkeypatch.setenv("MAX_BODY_BYTES", "1024")
    s = get_settings()
    assert s["PORT"] == 8080
    assert s["LOG_LEVEL"] == "DEBUG"
    assert s["MAX_BODY_BYTES"] == 1024
    assert s["HTTP_TIMEOUT"] == 60.0


def test_env_file_does_not_override_real_env(tmp_path, monkeypatch):
    env = tmp_path / ".env"
    env.write_text("# comment\nPORT=4000\nGOLDPHIN_TEST_FLAG='yes'\nnot a pair\n", encoding="utf-8")
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.delenv("GOLDPHIN_TEST_FLAG", raising=False)
    load_env_file(env)
    assert get_settings()["PORT"] == 5000
    assert os.environ["GOLDPHIN_TEST_FLAG"] == "yes"
    monkeypatch.delenv("GOLDPHIN_TEST_FLAG")
