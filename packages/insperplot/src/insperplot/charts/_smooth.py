"""Trend lines for scatter plots (lm, glm, loess, gam) via statsmodels."""

from __future__ import annotations

import numpy as np
import pandas as pd
import statsmodels.api as sm
from loguru import logger
from patsy import build_design_matrices, dmatrix

from insperplot.exceptions import InvalidInputError

SMOOTH_METHODS = ("lm", "loess", "gam", "glm")
GRID_POINTS = 80
LOESS_SPAN = 0.75
GAM_MAX_DF = 10


def fit_smooth(x: np.ndarray, y: np.ndarray, method: str = "lm", level: float = 0.95) -> pd.DataFrame:
    """Fitted trend on an evenly spaced grid over the range of ``x``.

    Returns:
        DataFrame with columns ``x``, ``fit``, ``lower``, ``upper``. The band
        columns are NaN for ``loess``.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    keep = ~(np.isnan(x) | np.isnan(y))
    x, y = x[keep], y[keep]
    if x.size < 3 or np.unique(x).size < 2:
        raise InvalidInputError("A trend line needs at least 3 points with 2 distinct x values")

    grid = np.linspace(x.min(), x.max(), GRID_POINTS)
    alpha = 1 - level

    if method == "loess":
        fitted = sm.nonparametric.lowess(y, x, frac=LOESS_SPAN, return_sorted=True)
        fit = np.interp(grid, fitted[:, 0], fitted[:, 1])
        return pd.DataFrame({"x": grid, "fit": fit, "lower": np.nan, "upper": np.nan})

    if method == "gam":
        df = min(GAM_MAX_DF, np.unique(x).size - 1)
        if df < 3:
            logger.debug("Too few distinct x values for a spline basis, using lm")
            return fit_smooth(x, y, "lm", level)
        design = dmatrix(f"bs(x, df={df}, degree=3)", {"x": x}, return_type="dataframe")
        model = sm.OLS(y, design).fit()
        grid_design = build_design_matrices([design.design_info], {"x": grid})[0]
        frame = model.get_prediction(np.asarray(grid_design)).summary_frame(alpha=alpha)
    elif method == "glm":
        model = sm.GLM(y, sm.add_constant(x), family=sm.families.Gaussian()).fit()
        frame = model.get_prediction(sm.add_constant(grid)).summary_frame(alpha=alpha)
    else:
        model = sm.OLS(y, sm.add_constant(x)).fit()
        frame = model.get_prediction(sm.add_constant(grid)).summary_frame(alpha=alpha)

    return pd.DataFrame(
        {
            "x": grid,
            "fit": frame["mean"].to_numpy(),
            "lower": frame["mean_ci_lower"].to_numpy(),
            "upper": frame["mean_ci_upper"].to_numpy(),
        }
    )
