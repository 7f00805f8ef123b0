"""Histogram bin-count rules (Sturges, Freedman-Diaconis, Scott)."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np
from loguru import logger

from insperplot.exceptions import (
    InvalidBinCountError,
    InvalidEnumValueError,
    InvalidInputError,
    MissingBinCountError,
)

BIN_METHODS = ("sturges", "freedman_diaconis", "fd", "scott", "manual")


def _clean(x: Iterable[float]) -> np.ndarray:
    try:
        arr = np.asarray(x, dtype=float).ravel()
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Bin computation needs numeric values: {e}") from e
    return arr[~np.isnan(arr)]


def nclass_sturges(x: Iterable[float]) -> int:
    """ceil(log2(n) + 1)."""
    n = _clean(x).size
    if n == 0:
        raise InvalidInputError("Cannot compute bins for an empty sample")
    return int(math.ceil(math.log2(n) + 1))


def nclass_scott(x: Iterable[float]) -> int:
    """Scott's normal-reference rule, h = 3.5 * sd * n^(-1/3)."""
    arr = _clean(x)
    n = arr.size
    if n == 0:
        raise InvalidInputError("Cannot compute bins for an empty sample")
    if n < 2:
        return 1
    h = 3.5 * float(np.std(arr, ddof=1)) * n ** (-1 / 3)
    if h <= 0:
        return 1
    return max(1, int(math.ceil(float(np.ptp(arr)) / h)))


def nclass_fd(x: Iterable[float]) -> int:
    """Freedman-Diaconis rule, h = 2 * IQR * n^(-1/3).

    When the IQR is zero the quantile window is widened until a non-zero
    spread is found (down to the 1/512 quantile).
    """
    arr = _clean(x)
    n = arr.size
    if n == 0:
        raise InvalidInputError("Cannot compute bins for an empty sample")
    if n < 2:
        return 1

    q25, q75 = np.quantile(arr, [0.25, 0.75])
    h = 2 * float(q75 - q25)
    if h == 0:
        alpha = 1 / 4
        while h == 0:
            alpha /= 2
            if alpha < 1 / 512:
                break
            lo, hi = np.quantile(arr, [alpha, 1 - alpha])
            h = float(hi - lo) / (1 - 2 * alpha)

    if h <= 0:
        return 1
    return max(1, int(math.ceil(float(np.ptp(arr)) / (h * n ** (-1 / 3)))))


def compute_bins(
    x: Iterable[float],
    method: str = "sturges",
    bins: int | None = None,
) -> int:
    """Number of histogram bins for ``x`` under ``method``.

    ``manual`` returns ``bins`` unchanged after validation.
    """
    if method not in BIN_METHODS:
        raise InvalidEnumValueError("bin_method", method, ("sturges", "freedman_diaconis", "scott", "manual"))

    if method == "manual":
        if bins is None:
            raise MissingBinCountError("bin_method='manual' requires an explicit 'bins' value")
        if isinstance(bins, bool) or not isinstance(bins, (int, np.integer)) or bins < 1:
            raise InvalidBinCountError(f"'bins' must be a positive integer; got {bins!r}")
        return int(bins)

    if method == "sturges":
        result = nclass_sturges(x)
    elif method == "scott":
        result = nclass_scott(x)
    else:
        result = nclass_fd(x)
    logger.debug("{} rule -> {} bins", method, result)
    return result
