"""Tests for the regression_checks command line."""

import pytest

from regression_checks import main


def test_inspect_prints_every_state(capsys):
    main(["--inspect", "5+3="])
    out = capsys.readouterr().out
    assert "total states:   4" in out
    assert "final text:     8" in out


def test_show_limits_listed_states(capsys):
    main(["--inspect", "123", "--show", "1"])
    out = capsys.readouterr().out
    assert "1. '1'" in out
    assert "2. '2'" not in out


def test_full_run_passes(capsys):
    main([])
    assert "All regression checks passed." in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["--inspect"], ["--inspect", "1+1=", "--show", "x"]])
def test_bad_arguments_exit(argv):
    with pytest.raises(SystemExit):
        main(argv)
