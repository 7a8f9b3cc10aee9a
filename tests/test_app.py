import pytest

from pandaflap.app import main


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_runs_a_few_frames():
    assert main(["--frames", "3", "--seed", "1", "--fps", "200"]) == 0


def test_zero_frames_returns_immediately():
    assert main(["--frames", "0"]) == 0


@pytest.mark.parametrize(
    "argv", [["--frames", "-1"], ["--fps", "0"], ["--seed", "abc"]]
)
def test_bad_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--frames" in capsys.readouterr().out