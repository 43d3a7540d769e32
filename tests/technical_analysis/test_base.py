"""Tests for BaseIndicator plumbing: data points, validation, history and reset."""

import logging
import math

import numpy as np
import pytest

from tickflow.technical_analysis import (
    SMA, EMA, RSI, MACD, IndicatorState,
    IndicatorError, InvalidDataError, MissingInputError, NumericDomainError
)


class TestUpdate:

    def test_reads_configured_field(self):
        sma = SMA(period=2, input_field='high')
        sma.update({'high': 4.0, 'close': 100.0})
        assert sma.update({'high': 6.0, 'close': 100.0}) == 5.0

    def test_missing_field(self):
        sma = SMA(period=2)
        with pytest.raises(MissingInputError) as excinfo:
            sma.update({'open': 1.0})
        assert excinfo.value.missing_fields == ['close']
        assert sma.fill_count == 0

    def test_records_timestamp(self):
        ema = EMA(period=3)
        assert ema.last_update_time is None
        ema.update({'close': 1.0, 'timestamp': '2024-01-02T09:15:00'})
        assert ema.last_update_time == '2024-01-02T09:15:00'

    def test_required_inputs(self):
        assert SMA(period=3, input_field='volume').required_inputs == ('volume',)


class TestSampleValidation:

    @pytest.mark.parametrize("sample", [None, "1.0", [1.0], True])
    def test_rejects_non_numeric(self, sample):
        sma = SMA(period=3)
        with pytest.raises(InvalidDataError):
            sma.apply(sample)
        with pytest.raises(InvalidDataError):
            sma.evaluate(sample)

    @pytest.mark.parametrize("sample", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, sample):
        sma = SMA(period=3)
        with pytest.raises(NumericDomainError):
            sma.apply(sample)
        assert sma.fill_count == 0

    def test_numeric_domain_error_is_an_indicator_error(self):
        with pytest.raises(IndicatorError) as excinfo:
            EMA(period=3).apply(math.nan)
        assert str(excinfo.value).startswith('[EMA]')

    def test_accepts_other_real_types(self):
        sma = SMA(period=3)
        assert sma.apply(2) == 2.0
        assert sma.apply(np.float64(4.0)) == 3.0

    def test_rejected_sample_leaves_state(self):
        rsi = RSI(period=3)
        rsi.apply(10.0)
        rsi.apply(11.0)
        with pytest.raises(NumericDomainError):
            rsi.apply(math.nan)
        assert rsi.fill_count == 2
        assert rsi.apply(12.0) == 100.0


class TestStateAndHistory:

    def test_fresh_indicator(self):
        sma = SMA(period=4)
        assert sma.state is IndicatorState.COLD
        assert sma.fill_count == 0
        assert sma.warmup_period == 4
        assert math.isnan(sma.value)
        assert sma.get_history() == []

    def test_history(self):
        sma = SMA(period=1)
        for x in range(1, 16):
            sma.apply(float(x))
        assert sma.get_history(3) == [13.0, 14.0, 15.0]
        assert len(sma.get_history()) == 10
        assert sma.get_history(0) == []

    def test_repr(self):
        sma = SMA(period=2)
        assert repr(sma) == "SMA(period=2, warming up (0/2))"
        sma.apply(1.0)
        sma.apply(1.0)
        assert str(sma) == "SMA(period=2, ready)"
        assert repr(MACD(3, 6)) == "MACD(fast_period=3, slow_period=6, warming up (0/6))"

    def test_warm_transition_logged(self, caplog):
        sma = SMA(period=2)
        with caplog.at_level(logging.DEBUG, logger='tickflow.technical_analysis.base'):
            sma.apply(1.0)
            sma.apply(2.0)
        assert "SMA warmed up after 2 samples" in caplog.text

    def test_leaf_has_no_children(self):
        assert SMA(period=3).children == []


class TestReset:

    def test_composite_reset_cascades(self):
        macd = MACD(fast_period=2, slow_period=3)
        for x in [1.0, 2.0, 3.0, 4.0]:
            macd.apply(x)
        assert macd.is_ready

        macd.reset()
        assert macd.state is IndicatorState.COLD
        assert all(child.state is IndicatorState.COLD for child in macd.children)
        assert all(child.fill_count == 0 for child in macd.children)
        assert math.isnan(macd.value)
        assert macd.last_update_time is None
        assert macd.apply(5.0) == 0.0
