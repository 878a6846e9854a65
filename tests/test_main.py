import argparse

import pytest

from termsnake import main as main_module
from termsnake.main import Worker, parse_args, run

from conftest import FakeTerminal


def test_parse_args_defaults_to_thirty_fps_without_log_file():
    args = parse_args([])
    assert args.fps == 30.0
    assert args.log_file is None
    assert args.log_level == "INFO"


def test_parse_args_accepts_overrides():
    args = parse_args(["--fps", "60", "--log-file", "snake.log", "--log-level", "DEBUG"])
    assert args.fps == 60.0
    assert args.log_file == "snake.log"
    assert args.log_level == "DEBUG"


@pytest.mark.parametrize("fps", ["0", "-5"])
def test_parse_args_rejects_non_positive_fps(fps):
    with pytest.raises(SystemExit):
        parse_args(["--fps", fps])


def test_run_plays_until_quit_and_restores_terminal():
    term = FakeTerminal(keys=["e", "x", "e", "q"])

    run(argparse.Namespace(fps=500.0), term=term)

    assert term.entered == ["fullscreen", "raw", "hidden_cursor"]
    assert term.exited == ["hidden_cursor", "raw", "fullscreen"]
    output = term.stream.getvalue()
    assert output.startswith("<clear><home>snake head gamecoord: (0.03,0.03)")
    assert "█" in output


def test_run_reraises_render_failure_after_joining_threads():
    class BrokenStream:
        def write(self, data):
            raise OSError("terminal gone")

        def flush(self):
            pass

    term = FakeTerminal(keys=["q"], stream=BrokenStream())

    with pytest.raises(OSError):
        run(argparse.Namespace(fps=500.0), term=term)
    assert term.exited == ["hidden_cursor", "raw", "fullscreen"]


def test_worker_keeps_the_exception_of_its_target():
    def boom(value):
        raise RuntimeError(value)

    worker = Worker("boom", boom, "bad")
    worker.start()
    worker.join(2.0)

    assert isinstance(worker.error, RuntimeError)
    assert str(worker.error) == "bad"


def test_main_wires_arguments_into_run(monkeypatch):
    calls = []
    monkeypatch.setattr(main_module, "run", lambda args: calls.append(args))
    monkeypatch.setattr(main_module, "configure_logging", lambda *a: calls.append(a))

    main_module.main(["--fps", "12"])

    assert calls[0] == (None, "INFO")
    assert calls[1].fps == 12.0
