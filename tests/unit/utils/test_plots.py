import sys

import pytest

from ose.exceptions import ConfigValidationError, DependencyError
from ose.simulation.curve import generate_curve
from ose.strategies.templates import long_call
from ose.utils.plots import plot_payoff_curve


@pytest.fixture()
def curve():
    return generate_curve(long_call(100.0, 100.0, premium=5.0), 100.0, steps=20)


def test_plot_dependency(monkeypatch, tmp_path, curve):
    monkeypatch.setitem(sys.modules, "plotly", None)
    with pytest.raises(DependencyError):
        plot_payoff_curve(curve, tmp_path / "payoff.html")


def test_plot_rejects_unknown_greek(tmp_path, curve):
    with pytest.raises(ConfigValidationError):
        plot_payoff_curve(curve, tmp_path / "payoff.html", greek="rho")


def test_plot_writes_html(tmp_path, curve):
    pytest.importorskip("plotly")

    path = plot_payoff_curve(
        curve, tmp_path / "charts" / "payoff.html", greek="Delta", current_price=100.0, breakevens=(105.0,)
    )

    assert path.exists()
    assert "Delta" in path.read_text()
