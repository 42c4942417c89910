"""
Descriptive statistics for the sampled houses.

- Contingency counts for two categorical columns
- ECDF and quartiles of a discrete column
- Skewness and a method-of-moments gamma fit for lot size
- Per-group coefficients of variation
- Pearson correlation matrix of the quantitative columns
"""

import numpy as np
import pandas as pd
from scipy import stats
from statsmodels.distributions.empirical_distribution import ECDF

QUANTITATIVE_COLUMNS = ["price", "lotsize", "bedrooms", "bathrms", "stories", "garagepl"]
QUARTILE_PROBS = (0, 0.25, 0.5, 0.75, 1)


def contingency_table(
    df: pd.DataFrame,
    rows: str = "stories",
    cols: str = "bedrooms",
    margins: bool = True,
) -> pd.DataFrame:
    """Counts of rows x cols, with row and column totals when margins is set."""
    return pd.crosstab(
        df[rows],
        df[cols],
        margins=margins,
        margins_name="Total",
    )


def empirical_cdf(series: pd.Series) -> ECDF:
    return ECDF(series.to_numpy())


def quartiles(series: pd.Series, probs=QUARTILE_PROBS) -> pd.Series:
    """Quantiles with linear interpolation between order statistics."""
    q = series.quantile(list(probs))
    q.index = [f"{p:.0%}" for p in probs]
    return q


def skewness(series: pd.Series) -> float:
    """Moment coefficient of skewness, m3 / m2**1.5, from population moments."""
    return float(stats.skew(series.to_numpy(dtype=float), bias=True))


def fit_gamma_moments(series: pd.Series) -> dict:
    """
    Method-of-moments gamma estimate:
    shape = mean**2 / var, rate = mean / var
    with the sample variance (ddof=1).
    """
    values = series.dropna()
    if len(values) < 2:
        raise ValueError("Need at least two observations to estimate gamma parameters")

    mean = values.mean()
    var = values.var(ddof=1)
    if var == 0:
        raise ValueError("Cannot fit a gamma distribution to data with zero variance")
    if mean <= 0:
        raise ValueError(f"Gamma fit requires a positive mean, got {mean}")

    return {
        "mean": mean,
        "var": var,
        "shape": mean ** 2 / var,
        "rate": mean / var,
    }


def gamma_density(fit: dict, x) -> np.ndarray:
    return stats.gamma.pdf(x, a=fit["shape"], scale=1.0 / fit["rate"])


def gamma_curve(series: pd.Series, fit: dict, num: int = 250) -> pd.DataFrame:
    """Gamma density on an even grid spanning the observed range."""
    x_vals = np.linspace(series.min(), series.max(), num)
    return pd.DataFrame({"x": x_vals, "density": gamma_density(fit, x_vals)})


def coefficient_of_variation(
    df: pd.DataFrame,
    value: str = "price",
    group: str = "prefarea",
) -> pd.DataFrame:
    """Mean, sd and cv = sd / mean of value within each group, in order of appearance."""
    grouped = df.groupby(group, sort=False)[value].agg(["mean", "std"])
    grouped["cv"] = grouped["std"] / grouped["mean"]
    return grouped


def correlation_matrix(df: pd.DataFrame, columns=None) -> pd.DataFrame:
    columns = list(QUANTITATIVE_COLUMNS if columns is None else columns)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Unknown columns for correlation matrix: {missing}")

    return df[columns].corr(method="pearson")
