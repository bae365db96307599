import logging

from staticserve import main as main_module


def test_main_prints_banner_and_runs(monkeypatch, capsys):
    werkzeug_logger = logging.getLogger("werkzeug")
    monkeypatch.setattr(werkzeug_logger, "level", werkzeug_logger.level)
    calls = []
    monkeypatch.setattr(main_module.app, "run", lambda **kwargs: calls.append(kwargs))

    main_module.main()

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "✓ Server running on http://localhost:8080",
        "✓ Serving files from: ./public",
    ]
    assert calls == [{"host": "0.0.0.0", "port": 8080, "threaded": True, "use_reloader": False}]
    assert werkzeug_logger.level == logging.ERROR
