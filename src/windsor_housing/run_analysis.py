"""
Descriptive statistics assignment for the Windsor (Canada) housing data.

This script:
- Loads the housing spreadsheet and draws a seeded sample of 250 houses
- Tabulates storeys against bedrooms
- Plots the ECDF of bedrooms and prints its quartiles
- Plots the lot size density, its skewness and a method-of-moments gamma fit
- Draws lot size boxplots by garage places
- Compares price dispersion across preferred / other areas
- Plots the correlation matrix of the quantitative variables
- Fits log(price) on log(lotsize) and checks the residuals
"""

import pathlib

import pandas as pd

from windsor_housing.analysis.descriptive import (
    QUANTITATIVE_COLUMNS,
    coefficient_of_variation,
    contingency_table,
    correlation_matrix,
    empirical_cdf,
    fit_gamma_moments,
    gamma_curve,
    quartiles,
    skewness,
)
from windsor_housing.data.make_dataset import (
    RANDOM_STATE,
    SAMPLE_SIZE,
    add_log_columns,
    draw_sample,
    load_housing,
)
from windsor_housing.models.log_log import (
    coefficient_table,
    evaluate_log_log_model,
    fit_log_log_model,
    fitted_line,
)
from windsor_housing.visualization.plots import (
    plot_boxplot_by_group,
    plot_correlation_heatmap,
    plot_density_histogram,
    plot_ecdf,
    plot_log_log_regression,
    plot_residual_qq,
)


# -----------------------------
# Paths and constants
# -----------------------------

# run_analysis.py is in src/windsor_housing, so parents[2] = repo root
ROOT = pathlib.Path(__file__).resolve().parents[2]
DATA_PATH = ROOT / "data" / "raw" / "housing.xlsx"
FIGURES_DIR = ROOT / "figures"
OUTPUTS_DIR = ROOT / "outputs"


def run(
    df: pd.DataFrame,
    figures_dir: pathlib.Path = FIGURES_DIR,
    outputs_dir: pathlib.Path = OUTPUTS_DIR,
    seed: int = RANDOM_STATE,
    n: int = SAMPLE_SIZE,
) -> dict:
    """Run every analysis step on a loaded table and return the printed statistics."""
    figures_dir = pathlib.Path(figures_dir)
    outputs_dir = pathlib.Path(outputs_dir)
    figures_dir.mkdir(parents=True, exist_ok=True)
    outputs_dir.mkdir(parents=True, exist_ok=True)

    houses = draw_sample(df, n=n, seed=seed)
    print(f"[run_analysis] sampled {len(houses)} of {len(df)} houses (seed={seed})")

    # 1. Contingency table
    cross_tab = contingency_table(houses, rows="stories", cols="bedrooms")
    print("\nStoreys (rows) by bedrooms (columns):")
    print(cross_tab)
    cross_tab.to_csv(outputs_dir / "stories_by_bedrooms.csv")

    # 2. ECDF and quartiles of bedrooms
    ecdf_bedrooms = empirical_cdf(houses["bedrooms"])
    plot_ecdf(ecdf_bedrooms, figures_dir / "ecdf_bedrooms.png")

    bedroom_quartiles = quartiles(houses["bedrooms"])
    print("\nBedroom quartiles:")
    print(bedroom_quartiles)

    # 3. Lot size distribution
    plot_density_histogram(houses["lotsize"], figures_dir / "hist_lotsize.png")

    skew_lotsize = skewness(houses["lotsize"])
    print(f"\nSkewness of lot size: {skew_lotsize:.4f}")

    gamma_fit = fit_gamma_moments(houses["lotsize"])
    print(
        f"Shape parameter = {gamma_fit['shape']:.4f}, "
        f"Rate parameter = {gamma_fit['rate']:.4f}"
    )
    plot_density_histogram(
        houses["lotsize"],
        figures_dir / "hist_lotsize_gamma.png",
        gamma_curve=gamma_curve(houses["lotsize"], gamma_fit),
    )

    # 4. Boxplots
    plot_boxplot_by_group(houses, figures_dir / "boxplot_lotsize_by_garagepl.png")

    # 5. Coefficient of variation of price by preferred area
    cv_table = coefficient_of_variation(houses, value="price", group="prefarea")
    print("\nPrice by preferred area:")
    print(cv_table)
    cv_table.to_csv(outputs_dir / "price_cv_by_prefarea.csv")

    # 6. Correlation matrix
    corr = correlation_matrix(houses, QUANTITATIVE_COLUMNS)
    print("\nCorrelation matrix:")
    print(corr.round(4))
    corr.to_csv(outputs_dir / "correlation_matrix.csv")
    plot_correlation_heatmap(corr, figures_dir / "correlation_matrix.png")

    # 7. Log-log regression and residual diagnostics
    houses = add_log_columns(houses)
    model = fit_log_log_model(houses)
    with open(outputs_dir / "ols_log_price_summary.txt", "w") as f:
        f.write(model.summary().as_text())

    metrics, _, resid = evaluate_log_log_model(model, houses)
    coef_df = coefficient_table(model)
    print("\nOLS log(price) ~ log(lotsize):")
    print(coef_df)
    print(metrics)
    coef_df.to_csv(outputs_dir / "ols_log_price_coefficients.csv", index=False)

    plot_log_log_regression(
        houses,
        fitted_line(model, houses["log_lotsize"]),
        figures_dir / "scatter_log_lotsize_vs_log_price.png",
    )
    plot_residual_qq(resid, figures_dir / "qq_residuals.png")

    return {
        "sample": houses,
        "contingency": cross_tab,
        "quartiles": bedroom_quartiles,
        "skewness": skew_lotsize,
        "gamma": gamma_fit,
        "cv": cv_table,
        "correlation": corr,
        "model": model,
        "metrics": metrics,
        "residuals": resid,
    }


# -----------------------------
# Main run
# -----------------------------

def main(data_path: pathlib.Path = DATA_PATH):
    df = load_housing(data_path)
    run(df)

    print("\nDone. Outputs written to:")
    print(f"  {OUTPUTS_DIR}")
    print(f"  {FIGURES_DIR}")


if __name__ == "__main__":
    main()
