import pytest

from ose.interfaces.option_leg import Action, OptionType
from ose.pricing.payoff import strategy_payoff
from ose.pricing.premium import estimate_premium
from ose.strategies import templates


def _shape(strategy):
    return [(leg.action, leg.type, leg.strike) for leg in strategy.legs]


def test_single_leg_templates():
    assert _shape(templates.long_call(100.0, 100.0)) == [(Action.BUY, OptionType.CALL, 100.0)]
    assert _shape(templates.short_call(100.0, 100.0)) == [(Action.SELL, OptionType.CALL, 100.0)]
    assert _shape(templates.long_put(100.0, 100.0)) == [(Action.BUY, OptionType.PUT, 100.0)]
    assert _shape(templates.short_put(100.0, 100.0)) == [(Action.SELL, OptionType.PUT, 100.0)]


def test_spread_and_straddle_templates():
    assert _shape(templates.bull_call_spread(100.0, 110.0, 105.0)) == [
        (Action.BUY, OptionType.CALL, 100.0),
        (Action.SELL, OptionType.CALL, 110.0),
    ]
    assert _shape(templates.bear_call_spread(100.0, 110.0, 105.0)) == [
        (Action.SELL, OptionType.CALL, 100.0),
        (Action.BUY, OptionType.CALL, 110.0),
    ]
    assert _shape(templates.bull_put_spread(100.0, 110.0, 105.0)) == [
        (Action.SELL, OptionType.PUT, 110.0),
        (Action.BUY, OptionType.PUT, 100.0),
    ]
    assert _shape(templates.bear_put_spread(110.0, 100.0, 105.0)) == [
        (Action.BUY, OptionType.PUT, 110.0),
        (Action.SELL, OptionType.PUT, 100.0),
    ]
    assert _shape(templates.long_straddle(100.0, 100.0)) == [
        (Action.BUY, OptionType.CALL, 100.0),
        (Action.BUY, OptionType.PUT, 100.0),
    ]
    assert _shape(templates.short_straddle(100.0, 100.0)) == [
        (Action.SELL, OptionType.CALL, 100.0),
        (Action.SELL, OptionType.PUT, 100.0),
    ]


def test_every_template_uses_single_contracts():
    built = [
        templates.long_call(100.0, 100.0),
        templates.bull_put_spread(95.0, 100.0, 100.0),
        templates.short_straddle(100.0, 100.0),
    ]
    assert all(leg.quantity == 1 for strategy in built for leg in strategy.legs)


def test_missing_premium_is_estimated():
    strategy = templates.long_put(95.0, 100.0, 45)

    assert strategy.legs[0].premium == pytest.approx(estimate_premium("put", 95.0, 100.0, 45))


def test_explicit_premiums_are_honored_including_zero():
    strategy = templates.bull_call_spread(100.0, 110.0, 105.0, long_premium=0.0, short_premium=2.0)

    assert [leg.premium for leg in strategy.legs] == [0.0, 2.0]

    straddle = templates.long_straddle(100.0, 100.0, call_premium=3.0)
    assert straddle.legs[0].premium == 3.0
    assert straddle.legs[1].premium == pytest.approx(estimate_premium("put", 100.0, 100.0))


def test_bear_call_spread_collects_credit_with_capped_loss():
    strategy = templates.bear_call_spread(100.0, 110.0, 105.0, short_premium=5.0, long_premium=2.0)

    assert strategy_payoff(strategy, 95.0) == pytest.approx(300.0)
    assert strategy_payoff(strategy, 130.0) == pytest.approx(-700.0)


def test_short_straddle_profits_near_strike():
    strategy = templates.short_straddle(100.0, 100.0, call_premium=3.0, put_premium=2.0)

    assert strategy_payoff(strategy, 100.0) == pytest.approx(500.0)
    assert strategy_payoff(strategy, 110.0) == pytest.approx(-500.0)
