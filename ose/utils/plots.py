"""Optional Plotly payoff chart."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ose.exceptions import ConfigValidationError, DependencyError
from ose.models.curve import Curve

GREEKS = ("delta", "gamma", "theta", "vega")


def plot_payoff_curve(
    curve: Curve,
    output_path: Path,
    *,
    greek: str = "vega",
    current_price: float | None = None,
    breakevens: Sequence[float] = (),
    title: str = "Payoff at Expiration",
) -> Path:
    """Write an HTML chart of payoff with one Greek on a secondary axis."""
    greek = greek.lower()
    if greek not in GREEKS:
        raise ConfigValidationError(f"greek must be one of {list(GREEKS)}")
    try:
        import plotly.graph_objects as go  # type: ignore
        from plotly.subplots import make_subplots  # type: ignore
    except Exception as exc:  # pragma: no cover - optional dependency
        raise DependencyError("plotly is required for plot generation") from exc

    prices = curve.prices
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Scatter(x=prices, y=curve.payoffs, mode="lines", name="P&L"), secondary_y=False)
    fig.add_trace(
        go.Scatter(x=prices, y=curve.column(greek), mode="lines", name=greek.title(), line={"dash": "dot"}),
        secondary_y=True,
    )
    fig.add_hline(y=0, line={"color": "gray", "width": 1})
    if current_price is not None:
        fig.add_vline(x=current_price, line={"color": "blue", "dash": "dash"}, annotation_text="Spot")
    for price in breakevens:
        fig.add_vline(x=price, line={"color": "orange", "dash": "dot"}, annotation_text=f"BE {price:.2f}")

    fig.update_layout(title=title, xaxis_title="Underlying Price")
    fig.update_yaxes(title_text="P&L", secondary_y=False)
    fig.update_yaxes(title_text=greek.title(), secondary_y=True)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(output_path))
    return output_path
