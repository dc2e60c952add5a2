from __future__ import annotations

import runpy


def test_main_module_invokes_server(monkeypatch):
    executed = {}

    def fake_main() -> None:
        executed["called"] = True

    monkeypatch.setattr("src.main.server.main", fake_main)

    runpy.run_module("src.main.__main__", run_name="__main__")

    assert executed["called"] is True


def test_server_runs_uvicorn_with_api_settings(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setenv("API_PORT", "9001")
    monkeypatch.setattr("src.main.server.uvicorn.run", fake_run)

    from src.main.server import main

    main()

    assert calls["app"] == "src.main.app:app"
    assert calls["port"] == 9001
    assert calls["log_config"] is None
