import dataclasses

import pytest

from ose.exceptions import SchemaError
from ose.interfaces.option_leg import Action, OptionLeg, OptionType, Strategy


def test_leg_coerces_string_enums():
    leg = OptionLeg(type="CALL", action="Sell", strike=100, premium=2, quantity=2)

    assert leg.type is OptionType.CALL
    assert leg.action is Action.SELL
    assert leg.sign == -1
    assert isinstance(leg.strike, float)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"type": "straddle"},
        {"action": "hold"},
        {"premium": -0.01},
        {"quantity": 0},
        {"quantity": 1.5},
    ],
)
def test_leg_rejects_invalid_fields(kwargs):
    base = {"type": "put", "action": "buy", "strike": 100.0, "premium": 1.0, "quantity": 1}
    base.update(kwargs)

    with pytest.raises(SchemaError):
        OptionLeg(**base)


def test_leg_accepts_degenerate_strike():
    leg = OptionLeg(type="call", action="buy", strike=0.0, premium=0.0)

    assert leg.strike == 0.0


def test_leg_is_immutable():
    leg = OptionLeg(type="call", action="buy", strike=100.0, premium=1.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        leg.strike = 105.0  # type: ignore[misc]


def test_strategy_net_premium_and_scaling():
    strategy = Strategy(
        name="Bull Call Spread",
        legs=[
            OptionLeg(type="call", action="buy", strike=100.0, premium=5.0),
            OptionLeg(type="call", action="sell", strike=110.0, premium=2.0),
        ],
    )

    assert isinstance(strategy.legs, tuple)
    assert strategy.net_premium == pytest.approx(-3.0)

    scaled = strategy.scaled(4)
    assert [leg.quantity for leg in scaled] == [4, 4]
    assert scaled.net_premium == pytest.approx(-12.0)
    assert [leg.quantity for leg in strategy] == [1, 1]


def test_strategy_scaled_rejects_non_positive_size():
    strategy = Strategy(name="Long Call", legs=[OptionLeg(type="call", action="buy", strike=100.0, premium=1.0)])

    with pytest.raises(SchemaError):
        strategy.scaled(0)


def test_strategy_rejects_non_leg_members():
    with pytest.raises(SchemaError):
        Strategy(name="bad", legs=[{"type": "call"}])

