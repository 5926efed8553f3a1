import alp.server as server


def test_main_runs_uvicorn_with_config(monkeypatch, tmp_path):
    monkeypatch.setattr(server, "setup_logging", lambda *a, **kw: None)
    calls = {}

    def fake_run(app, host, port, log_config=None):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr(server.uvicorn, "run", fake_run)
    yml = tmp_path/"server.yaml"
    yml.write_text("server:\n  host: 0.0.0.0\n  port: 3000\n")
    server.main(["--config", str(yml), "--port", "3100", "--grid", "node"])

    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 3100
    assert any(getattr(r, "path", None) == "/price" for r in calls["app"].routes)
