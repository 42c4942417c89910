#Load the Windsor housing spreadsheet and draw the analysis sample

import pathlib

import numpy as np
import pandas as pd

RANDOM_STATE = 964409
SAMPLE_SIZE = 250

REQUIRED_COLUMNS = ["price", "lotsize", "bedrooms", "stories", "garagepl", "prefarea"]


def load_housing(path) -> pd.DataFrame:
    """Read the housing spreadsheet (xlsx/xls, or csv) and check key columns."""
    path = pathlib.Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Housing data not found: {path}")

    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path)
    else:
        df = pd.read_excel(path)

    # Harmonize column names; some copies spell the column "storeys"
    df.columns = [str(c).strip().lower() for c in df.columns]
    df.rename(columns={"storeys": "stories"}, inplace=True)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns in dataset: {missing}")

    print(f"[make_dataset] loaded {path.name} (rows={len(df)})")
    return df


def draw_sample(
    df: pd.DataFrame,
    n: int = SAMPLE_SIZE,
    seed: int = RANDOM_STATE,
) -> pd.DataFrame:
    """Rows drawn without replacement; the same seed gives the same sample."""
    if n <= 0:
        raise ValueError(f"Sample size must be positive, got {n}")
    if n > len(df):
        raise ValueError(f"Cannot draw {n} rows without replacement from {len(df)}")

    return df.sample(n=n, replace=False, random_state=seed)


def add_log_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Add natural logs of lot size and price."""
    bad = [c for c in ["lotsize", "price"] if (df[c] <= 0).any()]
    if bad:
        raise ValueError(f"Columns must be strictly positive to take logs: {bad}")

    df = df.copy()
    df["log_lotsize"] = np.log(df["lotsize"])
    df["log_price"] = np.log(df["price"])
    return df
