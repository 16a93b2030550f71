import builtins
import importlib

import pytest

from scoundrel.config import Settings
from scoundrel.config import apply_overrides
from scoundrel.config import settings_from_env

main_mod = importlib.import_module("scoundrel.main")


def test_defaults_without_env():
    assert settings_from_env({}) == Settings(ui="rich", seed=None, log_level="WARNING", log_file=None)


def test_env_values_are_read():
    s = settings_from_env(
        {"SCOUNDREL_UI": "TERM", "SCOUNDREL_SEED": "17", "SCOUNDREL_LOG_LEVEL": "debug", "SCOUNDREL_LOG_FILE": "/tmp/s.log"}
    )
    assert s == Settings(ui="term", seed=17, log_level="DEBUG", log_file="/tmp/s.log")


@pytest.mark.parametrize("env", [{"SCOUNDREL_UI": "gtk"}, {"SCOUNDREL_SEED": "abc"}])
def test_bad_env_values_raise(env):
    with pytest.raises(ValueError):
        settings_from_env(env)


def test_cli_flags_override_env():
    s = apply_overrides(Settings(ui="rich", seed=3), ui="term", seed=None, log_level="INFO")
    assert s.ui == "term" and s.seed == 3 and s.log_level == "INFO"


def _no_logging_setup(monkeypatch):
    calls = []
    monkeypatch.setattr(main_mod, "setup_logging", lambda level, filename=None: calls.append((level, filename)))
    return calls


def test_main_returns_1_when_input_dies(monkeypatch, capsys):
    calls = _no_logging_setup(monkeypatch)

    def _eof(*args, **kwargs):
        raise EOFError

    monkeypatch.setattr(builtins, "input", _eof)
    assert main_mod.main(["--ui", "term", "--seed", "3", "--log-level", "info"]) == 1
    assert calls == [("INFO", None)]
    assert "could not read input" in capsys.readouterr().out


def test_main_returns_0_on_quit(monkeypatch, capsys):
    _no_logging_setup(monkeypatch)
    monkeypatch.setenv("SCOUNDREL_UI", "term")
    monkeypatch.setattr(builtins, "input", lambda prompt="": "q")
    assert main_mod.main([]) == 0


def test_main_rejects_bad_env(monkeypatch):
    _no_logging_setup(monkeypatch)
    monkeypatch.setenv("SCOUNDREL_SEED", "nope")
    with pytest.raises(SystemExit) as exc:
        main_mod.main([])
    assert exc.value.code == 2


def test_logging_default_ignores_env(monkeypatch):
    monkeypatch.setenv("SCOUNDREL_LOG_LEVEL", "DEBUG")
    logging_utils = importlib.reload(importlib.import_module("scoundrel.logging_utils"))
    assert logging_utils.LOG_LEVEL == "WARNING"
