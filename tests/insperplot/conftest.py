"""Shared fixtures for insperplot tests."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from insperplot.config import InsperSettings


@pytest.fixture()
def cars() -> pd.DataFrame:
    """mtcars-like frame: numeric cyl/gear, continuous mpg/wt/hp."""
    rng = np.random.default_rng(42)
    n = 32
    cyl = np.array([4, 6, 8] * 10 + [4, 8])
    return pd.DataFrame(
        {
            "cyl": cyl,
            "gear": np.array([3, 4, 5, 4] * 8),
            "wt": np.round(rng.uniform(1.5, 5.5, n), 2),
            "mpg": np.round(35 - cyl * 2 + rng.normal(0, 2, n), 1),
            "hp": np.round(rng.uniform(50, 330, n)),
            "brand": [f"car_{i % 5}" for i in range(n)],
        }
    )


@pytest.fixture()
def flowers() -> pd.DataFrame:
    """iris-like frame with a string ``species`` column."""
    rng = np.random.default_rng(7)
    species = np.repeat(["setosa", "versicolor", "virginica"], 20)
    base = np.repeat([5.0, 5.9, 6.6], 20)
    return pd.DataFrame(
        {
            "species": species,
            "sepal_length": np.round(base + rng.normal(0, 0.35, 60), 1),
            "sepal_width": np.round(3.0 + rng.normal(0, 0.3, 60), 1),
        }
    )


@pytest.fixture()
def series_df() -> pd.DataFrame:
    """Two monthly series in long form, deliberately unsorted by date."""
    dates = pd.date_range("2020-01-01", periods=12, freq="MS")
    frame = pd.DataFrame(
        {
            "date": np.concatenate([dates, dates]),
            "value": np.concatenate([np.arange(12.0), np.arange(12.0) * 2]),
            "region": ["north"] * 12 + ["south"] * 12,
        }
    )
    return frame.sample(frac=1.0, random_state=3).reset_index(drop=True)


@pytest.fixture()
def loaded_settings() -> InsperSettings:
    """Session settings with brand fonts marked as registered."""
    return InsperSettings(fonts_loaded=True)


@pytest.fixture()
def bare_settings() -> InsperSettings:
    return InsperSettings(fonts_loaded=False)
