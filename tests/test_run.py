import pytest

from src.server import run

TODO_ENV_VARS = [
    "TODO_HOST",
    "TODO_PORT",
    "TODO_CASE_SENSITIVE_SEARCH",
    "TODO_LOG_LEVEL",
    "TODO_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in TODO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def write_config(tmp_path):
    path = tmp_path / "app_config.yaml"
    path.write_text(
        "server:\n  host: 127.0.0.1\n  port: 8000\nlog:\n  level: INFO\n",
        encoding="utf-8",
    )
    return path


def test_load_config_applies_overrides(tmp_path):
    path = write_config(tmp_path)
    args = run.build_parser().parse_args(
        ["--config", str(path), "--host", "0.0.0.0", "--port", "9001", "--log-level", "DEBUG"]
    )

    config = run.load_config(args)

    assert config.server.host == "0.0.0.0"
    assert config.server.port == 9001
    assert config.log_level == "DEBUG"


def test_load_config_falls_back_to_env(tmp_path, monkeypatch):
    monkeypatch.setenv("TODO_PORT", "8765")
    args = run.build_parser().parse_args(["--config", str(tmp_path / "missing.yaml")])

    config = run.load_config(args)

    assert config.server.port == 8765


def test_env_overrides_yaml_and_options_override_env(tmp_path, monkeypatch):
    path = write_config(tmp_path)
    monkeypatch.setenv("TODO_PORT", "8765")
    monkeypatch.setenv("TODO_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("TODO_CASE_SENSITIVE_SEARCH", "true")

    config = run.load_config(run.build_parser().parse_args(["--config", str(path)]))

    assert config.server.host == "127.0.0.1"
    assert config.server.port == 8765
    assert config.log_level == "WARNING"
    assert config.todo.case_sensitive_search is True

    config = run.load_config(
        run.build_parser().parse_args(["--config", str(path), "--port", "9002"])
    )

    assert config.server.port == 9002


def test_log_level_is_case_insensitive():
    args = run.build_parser().parse_args(["--log-level", "debug"])

    assert args.log_level == "DEBUG"


def test_unknown_log_level_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run.main(["--log-level", "verbose"])

    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_main_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(run.uvicorn, "run", fake_run)
    monkeypatch.setattr(run, "setup_logger", lambda **kwargs: None)

    run.main(["--port", "8111"])

    assert calls["port"] == 8111
    assert calls["app"].title == "Todo Manager"
