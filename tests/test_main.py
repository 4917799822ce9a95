"""
Tests for the demonstration entry point.
"""

from trendfit.__main__ import main


def test_demo_output(capsys):
    main()
    out = capsys.readouterr().out
    assert "Fitted model: Model(intercept=" in out
    assert "R-squared: 0.9453" in out
    assert "Mean squared error: 0.5600" in out
    assert "Forecast for t = 5: 12.2000" in out
    assert "Forecast for t = 7: 16.6000" in out
    assert "Linear Trend Results" in out
