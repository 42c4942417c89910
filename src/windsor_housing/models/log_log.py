"""
Log-log regression of house price on lot size.

Fits log(price) = b0 + b1 * log(lotsize) by OLS and returns residuals and
fit metrics for the diagnostic plots.
"""

import numpy as np
import pandas as pd

from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
import statsmodels.api as sm

PREDICTOR_COL = "log_lotsize"
OUTCOME_COL = "log_price"


def fit_log_log_model(df: pd.DataFrame):
    """Fit OLS of log_price on log_lotsize with an intercept."""
    missing = [c for c in [PREDICTOR_COL, OUTCOME_COL] if c not in df.columns]
    if missing:
        raise ValueError(f"Missing log columns (run add_log_columns first): {missing}")

    X = sm.add_constant(df[[PREDICTOR_COL]])
    model = sm.OLS(df[OUTCOME_COL], X).fit()
    return model


def residuals(model) -> pd.Series:
    return model.resid


def evaluate_log_log_model(model, df: pd.DataFrame):
    """Fitted values, residuals and in-sample metrics on the log scale."""
    X = sm.add_constant(df[[PREDICTOR_COL]], has_constant="add")
    y = df[OUTCOME_COL]
    y_pred = model.predict(X)

    metrics = {
        "r2": r2_score(y, y_pred),
        "mae": mean_absolute_error(y, y_pred),
        "rmse": mean_squared_error(y, y_pred) ** 0.5,
    }
    return metrics, y_pred, y - y_pred


def coefficient_table(model) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "variable": ["intercept", PREDICTOR_COL],
            "coef": model.params.values,
            "std_err": model.bse.values,
            "p_value": model.pvalues.values,
        }
    )


def fitted_line(model, x: pd.Series, num: int = 100) -> pd.DataFrame:
    """Points on the regression line across the observed predictor range."""
    x_vals = np.linspace(x.min(), x.max(), num)
    intercept, slope = model.params.values
    return pd.DataFrame({"x": x_vals, "y": intercept + slope * x_vals})
