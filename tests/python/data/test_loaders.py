"""
Tests for observation loading and maturity parsing.
"""

import numpy as np
import pandas as pd
import pytest

from smith_wilson.data import (
    EXAMPLE_ALPHA,
    EXAMPLE_MATURITIES,
    EXAMPLE_RATES,
    EXAMPLE_TARGETS,
    EXAMPLE_UFR,
    load_observations,
    parse_maturities,
)


class TestExampleData:
    """Tests for the demonstration dataset."""

    def test_shapes(self):
        """Test observed and target grids."""
        assert EXAMPLE_MATURITIES.shape == (20,)
        assert EXAMPLE_RATES.shape == (20,)
        assert EXAMPLE_TARGETS.shape == (65,)
        assert EXAMPLE_MATURITIES[0] == 1.0 and EXAMPLE_MATURITIES[-1] == 20.0

    def test_parameters(self):
        """Test UFR and alpha."""
        assert EXAMPLE_UFR == 0.042
        assert EXAMPLE_ALPHA == 0.142068


class TestLoadObservations:
    """Tests for load_observations."""

    def test_load_csv_auto_columns(self, tmp_path):
        """Test maturity and rate columns are detected by name."""
        path = tmp_path / "rates.csv"
        pd.DataFrame({"Maturity": [1, 3, 5], "Rate": [0.01, 0.02, 0.025]}).to_csv(path, index=False)

        maturities, rates = load_observations(path)

        np.testing.assert_array_equal(maturities, [1.0, 3.0, 5.0])
        np.testing.assert_array_equal(rates, [0.01, 0.02, 0.025])

    def test_load_csv_alternative_names(self, tmp_path):
        """Test tenor/yield naming."""
        path = tmp_path / "curve.csv"
        pd.DataFrame({"tenor_years": [2, 10], "zero_yield": [0.015, 0.03]}).to_csv(path, index=False)

        maturities, rates = load_observations(path)

        np.testing.assert_array_equal(maturities, [2.0, 10.0])
        np.testing.assert_array_equal(rates, [0.015, 0.03])

    def test_explicit_columns(self, tmp_path):
        """Test explicit column names override detection."""
        path = tmp_path / "custom.csv"
        pd.DataFrame({"t": [1, 2], "r": [0.01, 0.02], "other": [9, 9]}).to_csv(path, index=False)

        maturities, rates = load_observations(path, maturity_column="t", rate_column="r")

        np.testing.assert_array_equal(maturities, [1.0, 2.0])
        np.testing.assert_array_equal(rates, [0.01, 0.02])

    def test_incomplete_rows_dropped(self, tmp_path):
        """Test rows with missing values are skipped."""
        path = tmp_path / "gaps.csv"
        path.write_text("maturity,rate\n1,0.01\n2,\n3,0.02\n")

        maturities, rates = load_observations(path)

        np.testing.assert_array_equal(maturities, [1.0, 3.0])
        np.testing.assert_array_equal(rates, [0.01, 0.02])

    def test_missing_file(self, tmp_path):
        """Test missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_observations(tmp_path / "missing.csv")

    def test_unsupported_format(self, tmp_path):
        """Test unknown suffixes are rejected."""
        path = tmp_path / "rates.txt"
        path.write_text("maturity,rate\n1,0.01\n")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_observations(path)

    def test_unknown_columns(self, tmp_path):
        """Test files without recognisable columns are rejected."""
        path = tmp_path / "bad.csv"
        pd.DataFrame({"a": [1], "b": [2]}).to_csv(path, index=False)
        with pytest.raises(ValueError, match="Could not identify"):
            load_observations(path)


class TestParseMaturities:
    """Tests for parse_maturities."""

    def test_list(self):
        """Test comma-separated values."""
        np.testing.assert_array_equal(parse_maturities("1, 2,3,5"), [1.0, 2.0, 3.0, 5.0])

    def test_range(self):
        """Test inclusive integer range."""
        result = parse_maturities("1:65")
        assert len(result) == 65
        assert result[0] == 1.0 and result[-1] == 65.0

    def test_range_with_step(self):
        """Test fractional step."""
        np.testing.assert_allclose(parse_maturities("0.5:2:0.5"), [0.5, 1.0, 1.5, 2.0])

    def test_mixed(self):
        """Test ranges and single values together."""
        np.testing.assert_array_equal(parse_maturities("1:3,10,20"), [1.0, 2.0, 3.0, 10.0, 20.0])

    @pytest.mark.parametrize("text", ["", "1:2:3:4", "1:5:0", "abc"])
    def test_invalid(self, text):
        """Test malformed input is rejected."""
        with pytest.raises(ValueError):
            parse_maturities(text)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
