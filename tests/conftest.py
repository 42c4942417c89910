import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def housing_df():
    """546 synthetic houses shaped like the Windsor data."""
    rng = np.random.default_rng(0)
    n = 546
    lotsize = np.round(1650 + rng.gamma(shape=3.0, scale=1200.0, size=n))
    price = np.round(np.exp(6.5 + 0.55 * np.log(lotsize) + rng.normal(0, 0.2, size=n)), -2)
    yes_no = lambda p: np.where(rng.random(n) < p, "yes", "no")

    return pd.DataFrame(
        {
            "price": price,
            "lotsize": lotsize,
            "bedrooms": rng.choice([1, 2, 3, 4, 5, 6], size=n, p=[0.01, 0.25, 0.55, 0.15, 0.03, 0.01]),
            "bathrms": rng.choice([1, 2, 3, 4], size=n, p=[0.75, 0.2, 0.04, 0.01]),
            "stories": rng.choice([1, 2, 3, 4], size=n, p=[0.4, 0.4, 0.1, 0.1]),
            "driveway": yes_no(0.86),
            "recroom": yes_no(0.18),
            "fullbase": yes_no(0.35),
            "gashw": yes_no(0.05),
            "airco": yes_no(0.32),
            "garagepl": rng.choice([0, 1, 2, 3], size=n, p=[0.55, 0.23, 0.2, 0.02]),
            "prefarea": yes_no(0.23),
        }
    )


@pytest.fixture
def reference_df():
    """546 houses built from fixed arithmetic, for checks against recorded values."""
    i = np.arange(546)
    k = (i * 37) % 546
    lotsize = 1650 + k * k // 30

    return pd.DataFrame(
        {
            "price": 25000 + 5 * lotsize + ((i * 53) % 97) * 300,
            "lotsize": lotsize,
            "bedrooms": 1 + (i * 7) % 5,
            "bathrms": 1 + (i % 4 == 0).astype(int) + (i % 12 == 0).astype(int),
            "stories": 1 + (i * 5) % 4,
            "driveway": "yes",
            "recroom": "no",
            "fullbase": "no",
            "gashw": "no",
            "airco": "no",
            "garagepl": (i // 7) % 4,
            "prefarea": np.where(i % 5 == 0, "yes", "no"),
        }
    )
