"""
Basic import tests for smith_wilson package.
"""

import pytest


def test_import_package():
    """Test that the main package can be imported."""
    import smith_wilson

    assert smith_wilson is not None


def test_version():
    """Test that version is defined and valid."""
    import smith_wilson

    assert smith_wilson.__version__ == "1.0.0"


def test_import_submodules():
    """Test that all submodules can be imported."""
    from smith_wilson import calibration
    from smith_wilson import data
    from smith_wilson import linalg
    from smith_wilson import models

    assert calibration is not None
    assert data is not None
    assert linalg is not None
    assert models is not None


def test_public_api():
    """Test top-level exports."""
    import smith_wilson

    for name in smith_wilson.__all__:
        assert hasattr(smith_wilson, name), f"missing export: {name}"


def test_error_hierarchy():
    """Test input errors are also ValueErrors."""
    from smith_wilson import (
        DimensionMismatchError,
        InvalidMaturityError,
        InvalidParameterError,
        SingularSystemError,
        SmithWilsonError,
    )

    assert issubclass(DimensionMismatchError, ValueError)
    assert issubclass(InvalidParameterError, ValueError)
    assert issubclass(InvalidMaturityError, InvalidParameterError)
    assert issubclass(SingularSystemError, SmithWilsonError)
    assert not issubclass(SingularSystemError, ValueError)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
