#Figures for the housing descriptive statistics

import pathlib

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
import statsmodels.api as sm

DPI = 300


def _save(out_path: pathlib.Path):
    out_path = pathlib.Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=DPI)
    plt.close()


def ecdf_steps(ecdf):
    """
    Step coordinates of an ECDF, padded with a flat run at 0 before the
    smallest observation and at 1 after the largest.

    The pad is max(8% of the range, median gap between distinct values).
    """
    # ECDF.x starts with -inf
    x = ecdf.x[1:]
    y = ecdf.y[1:]
    knots = np.unique(x)
    if len(knots) > 1:
        pad = max(0.08 * (knots[-1] - knots[0]), np.median(np.diff(knots)))
    else:
        pad = abs(knots[0]) / 16 or 1.0

    x = np.concatenate([[knots[0] - pad], x, [knots[-1] + pad]])
    y = np.concatenate([[0.0], y, [1.0]])
    return x, y


def histogram_edges(series: pd.Series, bins: int = 16) -> np.ndarray:
    """
    Bin edges with the first and last bins centred on the minimum and
    maximum, so bin width is range / (bins - 1).
    """
    lo, hi = series.min(), series.max()
    if bins < 2 or hi == lo:
        return np.histogram_bin_edges(series, bins=max(bins, 1))

    width = (hi - lo) / (bins - 1)
    return np.linspace(lo - width / 2, hi + width / 2, bins + 1)


def plot_ecdf(ecdf, out_path: pathlib.Path, xlabel: str = "Number of Bedrooms"):
    """Step ECDF with a marker at each observed value."""
    x, y = ecdf_steps(ecdf)
    values = np.unique(ecdf.x[1:])

    plt.figure(figsize=(7, 5))
    plt.step(x, y, where="post", color="blue")
    plt.scatter(values, ecdf(values), color="blue", s=40, zorder=3)
    plt.title("Cumulative Distribution of Bedrooms in the Houses of Windsor (Canada)")
    plt.xlabel(xlabel)
    plt.ylabel("Cumulative Proportion of Houses")
    plt.ylim(-0.02, 1.02)
    _save(out_path)


def plot_density_histogram(
    series: pd.Series,
    out_path: pathlib.Path,
    gamma_curve: pd.DataFrame = None,
    bins: int = 16,
):
    """Density histogram of lot size, with the fitted gamma pdf if given."""
    plt.figure(figsize=(7, 5))
    plt.hist(
        series,
        bins=histogram_edges(series, bins),
        density=True,
        color="darkblue",
        edgecolor="black",
        alpha=0.8,
    )

    if gamma_curve is None:
        title = "Distribution of Lot Sizes for Sampled Houses"
    else:
        plt.plot(gamma_curve["x"], gamma_curve["density"], color="red", linewidth=2)
        title = "Density of Lot Sizes with Fitted Gamma Distribution"

    plt.title(title)
    plt.xlabel("Lot Size (square feet)")
    plt.ylabel("Density")
    _save(out_path)


def plot_boxplot_by_group(
    df: pd.DataFrame,
    out_path: pathlib.Path,
    value: str = "lotsize",
    group: str = "garagepl",
):
    plt.figure(figsize=(7, 5))
    sns.boxplot(
        x=df[group].astype(int).astype(str),
        y=df[value],
        order=[str(g) for g in sorted(df[group].astype(int).unique())],
        color="#00CDCD",
        linecolor="black",
        flierprops={"markerfacecolor": "red", "markeredgecolor": "red"},
    )
    plt.title("Lot Size Distribution by Number of Garage Places")
    plt.xlabel("Number of Garage Places")
    plt.ylabel("Lot Size (square feet)")
    _save(out_path)


def plot_correlation_heatmap(corr: pd.DataFrame, out_path: pathlib.Path):
    """Annotated correlation heatmap on a 0..1 blue scale."""
    plt.figure(figsize=(7, 6))
    sns.heatmap(
        corr,
        vmin=0,
        vmax=1,
        cmap="Blues",
        annot=True,
        fmt=".4f",
        annot_kws={"color": "white", "size": 8},
        linewidths=0.5,
        linecolor="black",
        square=True,
    )
    plt.xticks(rotation=45, ha="right")
    plt.yticks(rotation=0)
    plt.title("Pairwise Correlations of Variables")
    _save(out_path)


def plot_log_log_regression(
    df: pd.DataFrame,
    line: pd.DataFrame,
    out_path: pathlib.Path,
):
    plt.figure(figsize=(7, 5))
    plt.scatter(df["log_lotsize"], df["log_price"], color="black", s=12)
    plt.plot(line["x"], line["y"], color="red", linewidth=1.5)
    plt.xlabel("log(Lot Size)")
    plt.ylabel("log(Price)")
    plt.title("Relationship Between Lot Size and House Price")
    _save(out_path)


def plot_residual_qq(residuals: pd.Series, out_path: pathlib.Path):
    """Normal Q-Q plot of residuals with a reference line through the quartiles."""
    fig, ax = plt.subplots(figsize=(6, 6))
    sm.qqplot(
        np.asarray(residuals),
        line="q",
        ax=ax,
        markerfacecolor="none",
        markeredgecolor="blue",
    )
    ref = ax.get_lines()[-1]
    ref.set_color("red")
    ref.set_linewidth(2)
    ax.set_title("Normal Q-Q Plot of Residuals")
    _save(out_path)
