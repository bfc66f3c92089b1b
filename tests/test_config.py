import importlib

import pytest

import config


@pytest.fixture
def reload_config(monkeypatch):
    """Recharge config avec l'environnement du test, puis restaure."""
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)
    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_non_numeric_log_keep_hours_falls_back_to_default(reload_config, capsys):
    cfg = reload_config(TEXTDESK_LOG_KEEP_HOURS="abc")
    assert cfg.LOG_KEEP_HOURS == 72
    assert "TEXTDESK_LOG_KEEP_HOURS" in capsys.readouterr().out


def test_numeric_log_keep_hours_is_used(reload_config):
    assert reload_config(TEXTDESK_LOG_KEEP_HOURS=" 12 ").LOG_KEEP_HOURS == 12


def test_unknown_theme_falls_back_to_system(reload_config):
    assert reload_config(TEXTDESK_THEME="neon").THEME == "system"
