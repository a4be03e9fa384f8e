from __future__ import annotations

from pathlib import Path

import stocksim.cli as cli


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.config is None
    assert args.host == "127.0.0.1"
    assert args.port == 8080
    assert args.log_level == "INFO"


def test_main_loads_config_and_runs_server(monkeypatch):
    calls = {}

    def fake_run(app, host, port, log_level):
        calls.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    config_path = Path(__file__).parent.parent / "config.example.toml"

    cli.main(["--config", str(config_path), "--port", "9000", "--log-level", "DEBUG"])

    assert calls["port"] == 9000
    assert calls["log_level"] == "debug"
    resolver = calls["app"].state.resolver
    assert resolver.find("TECH_STOCK_HIGH_VOL") is not None
