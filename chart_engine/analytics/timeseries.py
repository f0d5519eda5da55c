"""Moving averages and trend estimation for ordered series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd
import statsmodels.api as sm


@dataclass(slots=True)
class TrendResult:
    frame: pd.DataFrame
    model_summary: str | None
    slope: float | None


def simple_moving_average(values: Sequence[float], window: int) -> List[float]:
    """
    Mean of each full sliding window, so the result has ``n - window + 1`` entries.

    ``values`` are returned unchanged when ``window`` is not in ``1..n``.
    """
    series = pd.Series(values, dtype="float")
    if window <= 0 or window > len(series):
        return series.tolist()
    return series.rolling(window).mean().iloc[window - 1 :].tolist()


def exponential_moving_average(values: Sequence[float], alpha: float) -> List[float]:
    """
    Recursive ``alpha * x[i] + (1 - alpha) * ema[i - 1]`` seeded with the first value.

    ``alpha == 0`` carries the first value forward.
    """
    series = pd.Series(values, dtype="float")
    if series.empty:
        return []
    if not 0 <= alpha <= 1:
        raise ValueError(f"alpha must be in [0, 1], got {alpha}")
    if alpha == 0:
        return [float(series.iloc[0])] * len(series)
    return series.ewm(alpha=alpha, adjust=False).mean().tolist()


def build_trend(values: Sequence[float], *, window: int = 4, alpha: float = 0.3) -> TrendResult:
    """Return the series with rolling, exponential and OLS trend columns."""
    if len(values) == 0:
        empty = pd.DataFrame(columns=["index", "value", "sma", "ema", "trend"])
        return TrendResult(frame=empty, model_summary=None, slope=None)

    frame = pd.DataFrame({"index": np.arange(len(values)), "value": pd.Series(values, dtype="float")})
    frame["sma"] = frame["value"].rolling(max(window, 1), min_periods=1).mean()
    frame["ema"] = exponential_moving_average(frame["value"].tolist(), alpha)

    model_summary = None
    slope = None
    frame["trend"] = np.nan
    if len(frame) >= 3:
        X = sm.add_constant(frame["index"].astype(float), has_constant="add")
        model = sm.OLS(frame["value"], X).fit()
        frame["trend"] = model.predict(X)
        model_summary = model.summary().as_text()
        slope = float(model.params.iloc[1]) if len(model.params) > 1 else None

    return TrendResult(frame=frame, model_summary=model_summary, slope=slope)
