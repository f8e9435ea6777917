import json

import pandas as pd
import pytest
from typer.testing import CliRunner

import ose.cli.main as cli_main
from ose.cli.main import app
from ose.config.factories import FactoryBase
from ose.data.chain import OptionChain
from ose.exceptions import ConfigValidationError, DataSourceError, DependencyError, UnknownStrategyError

runner = CliRunner()


class FakeSource:
    name = "fake"

    def __init__(self):
        self.requested = []

    def get_expirations(self, symbol):
        return [1705622400, 1706227200]

    def get_option_chain(self, symbol, expiration):
        self.requested.append((symbol, expiration))
        calls = pd.DataFrame(
            {"strike": [95.0, 100.0, 105.0], "bid": [6.0, 2.0, 0.5], "ask": [6.4, 2.2, 0.7], "last_price": [6.2, 2.1, 0.6]}
        )
        return OptionChain(symbol=symbol, expiration=expiration, underlying_price=101.2, calls=calls)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("STRATEGY", "STRIKE", "PRICE", "SYMBOL", "DAYS", "WIDTH", "SIZE", "PRICE_RANGE", "LIVE_PREMIUMS"):
        monkeypatch.delenv(f"OSE_{key}", raising=False)


def test_analyze_writes_curve_csv(tmp_path):
    output = tmp_path / "curve.csv"

    result = runner.invoke(
        app,
        ["analyze", "--strategy", "long_straddle", "--strike", "100", "--price", "100", "--output", str(output)],
    )

    assert result.exit_code == 0, result.output
    assert "Long Straddle" in result.output
    frame = pd.read_csv(output)
    assert list(frame.columns) == ["price", "payoff", "delta", "gamma", "theta", "vega"]
    assert len(frame) == 201


def test_analyze_uses_market_data_for_spot_strike_and_premiums(monkeypatch, tmp_path):
    source = FakeSource()
    monkeypatch.setattr(
        "ose.cli.commands.analyze.data_source_factory", lambda config: FactoryBase("fake", lambda: source)
    )
    output = tmp_path / "result.json"

    result = runner.invoke(
        app,
        ["analyze", "--strategy", "long_call", "--symbol", "aapl", "--days", "14", "--output", str(output)],
    )

    assert result.exit_code == 0, result.output
    assert source.requested == [("AAPL", 1705622400)]
    payload = json.loads(output.read_text())
    leg = payload["strategy"]["legs"][0]
    assert leg["strike"] == 100.0
    assert leg["premium"] == pytest.approx(2.1)
    assert payload["current_price"] == pytest.approx(101.2)


def test_analyze_without_live_premiums_estimates(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "ose.cli.commands.analyze.data_source_factory", lambda config: FactoryBase("fake", lambda: FakeSource())
    )
    output = tmp_path / "result.json"

    result = runner.invoke(
        app,
        [
            "analyze", "--strategy", "long_call", "--symbol", "AAPL", "--expiration", "1706227200",
            "--days", "30", "--no-live-premiums", "--output", str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    leg = json.loads(output.read_text())["strategy"]["legs"][0]
    assert leg["premium"] != pytest.approx(2.1)


def test_analyze_rejects_bad_inputs():
    result = runner.invoke(app, ["analyze", "--strategy", "long_call", "--strike", "0", "--price", "100"])

    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigValidationError)


def test_analyze_rejects_unknown_strategy():
    result = runner.invoke(app, ["analyze", "--strategy", "iron_condor", "--price", "100"])

    assert isinstance(result.exception, UnknownStrategyError)


def test_analyze_reads_config_file(tmp_path):
    config = tmp_path / "analyze.yaml"
    config.write_text("strategy: short_put\nprice: 50\nstrike: 48\nsize: 2\n")
    output = tmp_path / "result.json"

    result = runner.invoke(app, ["analyze", "--config", str(config), "--output", str(output)])

    assert result.exit_code == 0, result.output
    legs = json.loads(output.read_text())["strategy"]["legs"]
    assert legs == [
        {"type": "put", "action": "sell", "strike": 48.0, "premium": legs[0]["premium"], "quantity": 2}
    ]


def test_templates_command_emits_json():
    result = runner.invoke(app, ["templates", "--json"])

    assert result.exit_code == 0
    assert len(json.loads(result.output)) == 10


@pytest.mark.parametrize(
    "exc,code",
    [
        (ConfigValidationError("bad"), 1),
        (DataSourceError("down"), 2),
        (DependencyError("missing"), 3),
        (KeyboardInterrupt(), 130),
        (RuntimeError("boom"), 255),
    ],
)
def test_main_maps_exceptions_to_exit_codes(monkeypatch, exc, code):
    def boom():
        raise exc

    monkeypatch.setattr(cli_main, "app", boom)
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)

    with pytest.raises(SystemExit) as excinfo:
        cli_main.main()
    assert excinfo.value.code == code


def test_analyze_spot_greeks_use_resolved_days(tmp_path):
    output = tmp_path / "result.json"

    result = runner.invoke(
        app,
        ["analyze", "--strategy", "long_call", "--price", "100", "--strike", "100", "--days", "7", "--output", str(output)],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(output.read_text())
    premium = payload["strategy"]["legs"][0]["premium"]
    assert payload["greeks"]["theta"] == pytest.approx(-premium * 0.03 * (7 / 30) ** 0.5)
    # The curve keeps the 30-day horizon for theta and vega.
    assert payload["curve"][100]["theta"] == pytest.approx(-premium * 0.03)
    assert f"{payload['greeks']['theta']:,.4f}" in result.output


def test_analyze_live_premiums_follow_env_and_config(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "ose.cli.commands.analyze.data_source_factory", lambda config: FactoryBase("fake", lambda: FakeSource())
    )
    args = ["analyze", "--strategy", "long_call", "--symbol", "AAPL", "--days", "30"]

    def premium(extra, name):
        output = tmp_path / name
        result = runner.invoke(app, [*args, *extra, "--output", str(output)])
        assert result.exit_code == 0, result.output
        return json.loads(output.read_text())["strategy"]["legs"][0]["premium"]

    monkeypatch.setenv("OSE_LIVE_PREMIUMS", "false")
    assert premium([], "env.json") != pytest.approx(2.1)
    assert premium(["--live-premiums"], "cli.json") == pytest.approx(2.1)

    monkeypatch.delenv("OSE_LIVE_PREMIUMS")
    config = tmp_path / "analyze.yaml"
    config.write_text("live_premiums: false\n")
    assert premium(["--config", str(config)], "file.json") != pytest.approx(2.1)
    assert premium([], "default.json") == pytest.approx(2.1)


def test_analyze_prints_net_premium():
    result = runner.invoke(
        app,
        ["analyze", "--strategy", "bull_call_spread", "--strike", "100", "--price", "100", "--width", "10"],
    )

    assert result.exit_code == 0, result.output
    assert "Net premium:" in result.output
    assert "debit" in result.output
