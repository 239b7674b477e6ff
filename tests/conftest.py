"""
Pytest configuration and shared fixtures for rdcalc tests.
"""

import pandas as pd
import pytest


@pytest.fixture
def well_formed_expressions() -> pd.DataFrame:
    """Expressions paired with the value ordinary arithmetic gives them."""
    return pd.DataFrame({
        "expression": [
            "3 + 5 * (2 - 8)",
            "10 / 2 / 5",
            "2 * 3 + 4",
            "2 * (3 + 4)",
            "8 - 3 - 2",
            "1.5 + .5",
            "((7))",
        ],
        "expected": [-27.0, 1.0, 10.0, 14.0, 3.0, 2.0, 7.0],
    })


@pytest.fixture
def mixed_expressions() -> pd.Series:
    """A labelled column where some rows fail to evaluate."""
    return pd.Series(
        ["1 + 1", "1 / 0", "(1 + 2", "2 @ 3", "", "4 * 2.5"],
        index=["a", "b", "c", "d", "e", "f"],
        name="expr",
    )
