import numpy as np
import pandas as pd
import pytest

from windsor_housing.data.make_dataset import (
    RANDOM_STATE,
    SAMPLE_SIZE,
    add_log_columns,
    draw_sample,
    load_housing,
)


def test_load_housing_reads_xlsx(tmp_path, housing_df):
    path = tmp_path / "housing.xlsx"
    housing_df.to_excel(path, index=False)

    df = load_housing(path)

    assert len(df) == 546
    assert list(df.columns) == list(housing_df.columns)
    assert df["lotsize"].sum() == housing_df["lotsize"].sum()


def test_load_housing_normalizes_storeys_column(tmp_path, housing_df):
    path = tmp_path / "housing.csv"
    housing_df.rename(columns={"stories": "Storeys"}).to_csv(path, index=False)

    df = load_housing(path)

    assert "stories" in df.columns
    assert "storeys" not in df.columns


def test_load_housing_missing_column(tmp_path, housing_df):
    path = tmp_path / "housing.csv"
    housing_df.drop(columns=["prefarea"]).to_csv(path, index=False)

    with pytest.raises(ValueError, match="prefarea"):
        load_housing(path)


def test_load_housing_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_housing(tmp_path / "nope.xlsx")


def test_draw_sample_is_reproducible(housing_df):
    first = draw_sample(housing_df)
    second = draw_sample(housing_df, n=SAMPLE_SIZE, seed=RANDOM_STATE)

    assert len(first) == 250
    assert first.index.is_unique
    pd.testing.assert_frame_equal(first, second)


def test_draw_sample_depends_on_seed(housing_df):
    a = draw_sample(housing_df, seed=1)
    b = draw_sample(housing_df, seed=2)
    assert not a.index.equals(b.index)


@pytest.mark.parametrize("n", [0, 547])
def test_draw_sample_rejects_bad_sizes(housing_df, n):
    with pytest.raises(ValueError):
        draw_sample(housing_df, n=n)


def test_add_log_columns(housing_df):
    out = add_log_columns(housing_df)

    np.testing.assert_allclose(out["log_lotsize"], np.log(housing_df["lotsize"]))
    np.testing.assert_allclose(out["log_price"], np.log(housing_df["price"]))
    assert "log_price" not in housing_df.columns


def test_add_log_columns_rejects_non_positive():
    df = pd.DataFrame({"price": [1000.0, 0.0], "lotsize": [10.0, 20.0]})
    with pytest.raises(ValueError, match="price"):
        add_log_columns(df)
