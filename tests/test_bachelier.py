"""Tests for the Bachelier ATM closed forms."""

import math
import pytest
from ivpricer.bachelier import bachelier_implied_vol_atm, bachelier_price_atm
from ivpricer.errors import InvalidArgument


class TestBachelierImpliedVolATM:
    def test_reference_scenario(self):
        option_price = 100.0 * 0.20 / math.sqrt(2.0 * math.pi)
        sigma = bachelier_implied_vol_atm(option_price, 100.0, 1.0, 0.05)
        assert abs(sigma - 0.20) < 1e-14

    def test_rate_is_ignored(self):
        a = bachelier_implied_vol_atm(3.0, 50.0, 0.25, 0.0)
        b = bachelier_implied_vol_atm(3.0, 50.0, 0.25, 0.25)
        assert a == b

    def test_scales_with_sqrt_T(self):
        short = bachelier_implied_vol_atm(4.0, 100.0, 0.25, 0.0)
        long = bachelier_implied_vol_atm(4.0, 100.0, 1.0, 0.0)
        assert abs(short - 2.0 * long) < 1e-14

    def test_inverse_of_price(self):
        for sigma in (0.05, 0.2, 0.8):
            px = bachelier_price_atm(sigma, 80.0, 2.0)
            assert abs(bachelier_implied_vol_atm(px, 80.0, 2.0, 0.01) - sigma) < 1e-14

    @pytest.mark.parametrize("args,name", [
        ((0.0, 100.0, 1.0, 0.05), "option_price"),
        ((-1.0, 100.0, 1.0, 0.05), "option_price"),
        ((5.0, 0.0, 1.0, 0.05), "S"),
        ((5.0, -100.0, 1.0, 0.05), "S"),
        ((5.0, 100.0, 0.0, 0.05), "T"),
        ((5.0, 100.0, -1.0, 0.05), "T"),
    ])
    def test_invalid_arguments(self, args, name):
        with pytest.raises(InvalidArgument) as exc:
            bachelier_implied_vol_atm(*args)
        assert exc.value.name == name
        assert name in str(exc.value)

    def test_first_violation_reported(self):
        with pytest.raises(InvalidArgument) as exc:
            bachelier_implied_vol_atm(0.0, 0.0, 0.0, 0.0)
        assert exc.value.name == "option_price"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            bachelier_implied_vol_atm(1.0, 100.0, float("nan"), 0.0)


class TestBachelierPriceATM:
    def test_zero_vol_is_free(self):
        assert bachelier_price_atm(0.0, 100.0, 1.0) == 0.0

    def test_rejects_negative_vol(self):
        with pytest.raises(InvalidArgument, match="sigma"):
            bachelier_price_atm(-0.1, 100.0, 1.0)
