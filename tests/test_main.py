"""Tests for the demo driver."""

from parental_control.main import main


def test_main_prints_demo(monkeypatch, capsys):
    """Test the demo runs end to end against the sample catalog."""
    monkeypatch.setenv("PARENTAL_CONTROL_SEED_SAMPLE_CATALOG", "true")

    main()

    output = capsys.readouterr().out
    assert "=== Parental Control Demo ===" in output
    assert "Access granted. You can watch 'Baby's Day Out' (rated Universal)" in output
    assert "Content not found: NonExistentMovie" in output
    assert "Parental Guidance 13: 3 titles" in output
    assert "Legacy result: You have permission for this movie" in output


def test_main_survives_unknown_log_level(monkeypatch, capsys):
    """Test the demo still runs with an unrecognised log level."""
    monkeypatch.setenv("PARENTAL_CONTROL_LOG_LEVEL", "verbose")

    main()

    assert "=== Parental Control Demo ===" in capsys.readouterr().out
