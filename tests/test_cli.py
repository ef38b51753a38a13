from __future__ import annotations

import pytest

from snek import cli
from snek.backends import HeadlessBackend, SurfaceError


def test_headless_survival_run(capsys) -> None:
    assert cli.main(["--backend", "headless", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Game Over! Crashed after 4 ticks" in out


def test_headless_bounded_run(capsys) -> None:
    assert cli.main(["--backend", "headless", "--ticks", "2", "--seed", "1"]) == 0
    assert "Stopped after 2 ticks" in capsys.readouterr().out


def test_negative_ticks_is_rejected(capsys) -> None:
    assert cli.main(["--backend", "headless", "--ticks", "-1"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_unknown_backend_exits_with_usage() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--backend", "crt"])
    assert exc.value.code == 2


class BrokenBackend(HeadlessBackend):
    def open(self) -> None:
        raise SurfaceError("terminal is 10x5, need at least 22x11")


def test_surface_failure_aborts_before_the_game(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "open_backend", lambda name, settings: BrokenBackend(settings))
    assert cli.main(["--backend", "terminal"]) == 2
    captured = capsys.readouterr()
    assert "error: terminal is 10x5" in captured.err
    assert captured.out == ""


def test_debug_grow_flag_reaches_settings(monkeypatch) -> None:
    seen = []

    def fake_open(name, settings):
        seen.append(settings)
        return HeadlessBackend(settings)

    monkeypatch.setattr(cli, "open_backend", fake_open)
    assert cli.main(["--backend", "headless", "--ticks", "1", "--debug-grow"]) == 0
    assert seen[0].debug_grow
