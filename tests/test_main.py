"""Tests for main module."""

import pytest

from lazy_sequences import main as main_module
from lazy_sequences.main import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["RANGE_START", "RANGE_TOTAL", "FILTER_LETTER", "PAUSE_BETWEEN_SECTIONS"]:
        monkeypatch.delenv(name, raising=False)


def test_main_runs_single_demo(capsys):
    """Test running one demo non-interactively."""
    exit_code = main(["--demo", "letter", "--no-pause"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Sarah" in captured.out
    assert "Steve" not in captured.out


def test_main_invalid_config_returns_error(monkeypatch):
    """Test that configuration errors are reported with exit code 1."""
    monkeypatch.setenv("RANGE_TOTAL", "-1")

    assert main(["--demo", "evens"]) == 1


def test_main_keyboard_interrupt(monkeypatch):
    """Test that an interrupted menu exits with code 130."""

    def interrupted(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module.ConsoleDriver, "run_menu", interrupted)

    assert main([]) == 130


def test_main_rejects_unknown_demo():
    """Test that argparse rejects unknown demo names."""
    with pytest.raises(SystemExit):
        main(["--demo", "unknown"])
