from __future__ import annotations

import runpy
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
for _area in ("canvas", "codec", "core", "imaging"):
    sys.path.insert(0, str(ROOT / "packages" / _area))

import ppmkit_app.__main__ as cli_main_entry
import ppmkit_app.cli as cli


def test_main_without_args_shows_help(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_main_entry, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = cli_main_entry.main([])
    assert rc == 0
    assert calls == [["--help"]]


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_main_entry, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = cli_main_entry.main(["info", "image.ppm"])
    assert rc == 0
    assert calls == [["info", "image.ppm"]]


def test_cli_main_configures_logging_and_runs(monkeypatch, tmp_path, capsys) -> None:
    configured: list = []
    monkeypatch.setattr(cli, "configure_logging", lambda settings=None, directory=None: configured.append(settings))
    monkeypatch.setattr(cli, "load_config", lambda path=None, patterns=None: cli.AppConfig())

    out = tmp_path / "blank.ppm"
    rc = cli.main(["blank", str(out), "--width", "1", "--height", "1"])
    assert rc == 0
    assert configured and configured[0].console is False
    assert out.read_text(encoding="utf-8") == "P3\n1 1\n255\n0 0 0\n"
    assert '"success": true' in capsys.readouterr().out


def test_main_module_runpath_without_package_context() -> None:
    main_path = ROOT / "apps" / "cli" / "ppmkit_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result
