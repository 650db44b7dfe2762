"""
Tests for the fitted SmithWilsonCurve.
"""

import numpy as np
import pandas as pd
import pytest

from smith_wilson import SmithWilsonCurve, calibrate
from smith_wilson.errors import (
    DimensionMismatchError,
    InvalidMaturityError,
    InvalidParameterError,
)
from smith_wilson.linalg import CholeskySolver


class TestSmithWilsonCurve:
    """Tests for SmithWilsonCurve."""

    @pytest.fixture
    def curve(self, example_data):
        """Curve fitted to the example dataset."""
        return SmithWilsonCurve.fit(
            example_data["rates"],
            example_data["maturities"],
            ufr=example_data["ufr"],
            alpha=example_data["alpha"],
        )

    def test_fit_matches_calibrate(self, curve, example_data):
        """Test the curve holds the same b as the functional API."""
        b = calibrate(
            example_data["rates"],
            example_data["maturities"],
            example_data["ufr"],
            example_data["alpha"],
        )
        np.testing.assert_allclose(curve.b, b, rtol=1e-10)

    def test_repricing_errors(self, curve):
        """Test fitted rates reprice the observations."""
        assert np.max(np.abs(curve.repricing_errors())) < 1e-8

    def test_zero_rates_regression(self, curve):
        """Test extrapolated rates against recorded values."""
        rates = curve.zero_rates([21.0, 30.0, 65.0])
        np.testing.assert_allclose(
            rates,
            [0.043665623923531571, 0.047218309564072136, 0.045183541415720896],
            rtol=1e-8,
        )

    def test_discount_factors_at_zero(self, curve):
        """Test P(0) == 1."""
        np.testing.assert_allclose(curve.discount_factors([0.0]), [1.0], rtol=1e-14)

    def test_discount_factors_consistent_with_rates(self, curve):
        """Test P(t) == (1 + r(t)) ** (-t)."""
        t = np.array([0.5, 5.0, 25.0, 60.0])
        np.testing.assert_allclose(
            curve.discount_factors(t),
            (1.0 + curve.zero_rates(t)) ** (-t),
            rtol=1e-12,
        )

    def test_forward_rates_converge_to_ufr(self, curve):
        """Test one-year forwards approach the UFR far out."""
        forward = curve.forward_rates([199.0])
        assert abs(forward[0] - curve.ufr) < 1e-8

    def test_forward_rates_invalid_tenor(self, curve):
        """Test tenor must be positive."""
        with pytest.raises(InvalidParameterError):
            curve.forward_rates([1.0], tenor=0.0)

    def test_zero_rate_at_zero_maturity(self, curve):
        """Test zero target maturity has no rate."""
        with pytest.raises(InvalidMaturityError):
            curve.zero_rates([0.0, 1.0])

    def test_to_frame(self, curve):
        """Test tabular export."""
        table = curve.to_frame(np.arange(1.0, 66.0))

        assert isinstance(table, pd.DataFrame)
        assert list(table.columns) == ["maturity", "zero_rate", "discount_factor", "forward_rate"]
        assert len(table) == 65
        assert table["discount_factor"].is_monotonic_decreasing

    def test_to_dict(self, curve):
        """Test conversion to dictionary."""
        d = curve.to_dict()
        assert d["ufr"] == 0.042
        assert len(d["b"]) == 20
        assert d["observed_maturities"][0] == 1.0

    def test_arrays_are_read_only(self, curve):
        """Test stored arrays cannot be modified in place."""
        with pytest.raises(ValueError):
            curve.b[0] = 0.0

    def test_b_length_validated(self, example_data):
        """Test b must match the observed set."""
        with pytest.raises(DimensionMismatchError):
            SmithWilsonCurve(
                observed_maturities=example_data["maturities"],
                observed_rates=example_data["rates"],
                ufr=0.042,
                alpha=0.1,
                b=np.zeros(3),
            )

    def test_fit_with_solver(self, irregular_data):
        """Test an explicit solver can be passed through fit."""
        curve = SmithWilsonCurve.fit(
            irregular_data["rates"],
            irregular_data["maturities"],
            ufr=irregular_data["ufr"],
            alpha=irregular_data["alpha"],
            solver=CholeskySolver(),
        )
        np.testing.assert_allclose(
            curve.zero_rates(irregular_data["maturities"]),
            irregular_data["rates"],
            atol=1e-10,
        )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
