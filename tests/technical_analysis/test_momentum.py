"""Tests for the Relative Strength Index."""

import math

import numpy as np
import pandas as pd
import pytest

from tickflow.technical_analysis import RSI, InvalidParameterError, NumericDomainError


def reference_rsi(prices, period, smoothing='wilders'):
    """Batch RSI: mean-seeded smoothing of gains and losses via pandas ewm."""
    delta = pd.Series(prices).diff().iloc[1:]
    gains = delta.clip(lower=0)
    losses = (-delta).clip(lower=0)
    alpha = 1.0 / period if smoothing == 'wilders' else 2.0 / (period + 1)

    def smooth(series):
        seed = series.iloc[:period].mean()
        return pd.Series([seed] + list(series.iloc[period:])).ewm(alpha=alpha, adjust=False).mean()

    avg_gain = smooth(gains)
    avg_loss = smooth(losses)
    return list(100 - 100 / (1 + avg_gain / avg_loss))


class TestRSI:

    def test_first_sample_is_undefined(self):
        rsi = RSI(period=14)
        assert math.isnan(rsi.evaluate(100.0))
        assert math.isnan(rsi.apply(100.0))
        assert not rsi.is_ready

    def test_only_gains_is_maximal_strength(self):
        rsi = RSI(period=3)
        outputs = [rsi.apply(x) for x in [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]]
        assert math.isnan(outputs[0])
        assert outputs[1:] == [100.0] * 5

    def test_only_losses_is_zero(self):
        rsi = RSI(period=3)
        outputs = [rsi.apply(x) for x in [5.0, 4.0, 3.0, 2.0, 1.0]]
        assert outputs[1:] == [0.0] * 4

    def test_flat_stream_undefined_until_warm(self):
        rsi = RSI(period=3)
        outputs = [rsi.apply(5.0) for _ in range(6)]
        assert all(math.isnan(x) for x in outputs[:3])
        assert outputs[3:] == [100.0] * 3
        assert rsi.is_ready

    def test_warm_after_period_plus_one(self):
        rsi = RSI(period=3)
        for x in [1.0, 2.0, 3.0]:
            rsi.apply(x)
        assert not rsi.is_ready
        rsi.apply(2.0)
        assert rsi.is_ready
        assert rsi.warmup_period == 4

    def test_seed_period_delays_warm(self):
        rsi = RSI(period=3, seed_period=2)
        for x in [1.0, 2.0, 3.0, 2.0, 4.0]:
            rsi.apply(x)
        assert not rsi.is_ready
        rsi.apply(5.0)
        assert rsi.is_ready

    def test_balanced_moves(self):
        rsi = RSI(period=2)
        rsi.apply(1.0)
        rsi.apply(2.0)
        assert rsi.apply(1.0) == 50.0
        assert rsi.average_gain == 0.5
        assert rsi.average_loss == 0.5
        assert rsi.relative_strength == 1.0

    def test_relative_strength_edge_cases(self):
        rsi = RSI(period=2)
        assert math.isnan(rsi.relative_strength)
        rsi.apply(1.0)
        rsi.apply(2.0)
        assert rsi.relative_strength == math.inf

    @pytest.mark.parametrize("smoothing", ['wilders', 'ema'])
    def test_matches_batch_reference(self, prices, smoothing):
        period = 14
        rsi = RSI(period=period, smoothing_strategy=smoothing)
        ours = [rsi.apply(p) for p in prices]
        expected = reference_rsi(prices, period, smoothing)
        assert np.allclose(ours[period:], expected, rtol=1e-9, atol=1e-9)

    def test_bounded_once_warm(self, prices):
        rsi = RSI(period=5)
        zigzag = [p + (3.0 if i % 2 else -3.0) for i, p in enumerate(prices)]
        for price in prices + zigzag:
            value = rsi.apply(price)
            if rsi.is_ready:
                assert 0.0 <= value <= 100.0

    def test_evaluate_does_not_move_previous_price(self):
        rsi = RSI(period=2)
        for x in [10.0, 11.0, 10.5]:
            rsi.apply(x)
        before = (rsi.average_gain, rsi.average_loss)
        projected = rsi.evaluate(20.0)
        rsi.evaluate(0.0)
        assert (rsi.average_gain, rsi.average_loss) == before
        assert rsi.apply(20.0) == projected

    def test_nan_sample_is_rejected(self):
        rsi = RSI(period=3)
        rsi.apply(1.0)
        with pytest.raises(NumericDomainError):
            rsi.apply(float('nan'))
        with pytest.raises(NumericDomainError):
            rsi.evaluate(float('inf'))

    def test_large_gains_do_not_poison_averages(self):
        rsi = RSI(period=3)
        outputs = [rsi.apply(x) for x in [0.0, 1.6e308, 0.0, 1.6e308]]
        assert outputs[1] == 100.0
        assert outputs[2] == pytest.approx(50.0)
        assert outputs[3] == pytest.approx(200.0 / 3.0)
        assert rsi.is_ready
        assert math.isfinite(rsi.average_gain)

    def test_overflowing_price_change_is_surfaced(self):
        rsi = RSI(period=5)
        rsi.apply(1e308)
        with pytest.raises(NumericDomainError) as excinfo:
            rsi.evaluate(-1e308)
        assert excinfo.value.field_name == 'price_change'
        with pytest.raises(NumericDomainError):
            rsi.apply(-1e308)
        assert rsi.fill_count == 1
        assert rsi.apply(1e307) == 0.0

    @pytest.mark.parametrize("kwargs", [
        {'period': 0},
        {'period': 14, 'smoothing_strategy': 'sma'},
        {'period': 14, 'seed_period': -1},
    ])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(InvalidParameterError):
            RSI(**kwargs)

    def test_reset(self):
        rsi = RSI(period=2)
        for x in [1.0, 2.0, 3.0]:
            rsi.apply(x)
        rsi.reset()
        assert not rsi.is_ready
        assert math.isnan(rsi.average_gain)
        assert math.isnan(rsi.apply(3.0))
