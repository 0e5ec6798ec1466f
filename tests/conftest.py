import numpy as np
import pandas as pd
import pytest

from loopless.config import Config


@pytest.fixture(autouse=True)
def fresh_config(tmp_path, monkeypatch):
    """Each test runs in its own directory with a freshly loaded Config."""
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def penguins():
    """A few rows shaped like the Palmer penguins table, with one all-missing row."""
    nan = np.nan
    return pd.DataFrame({
        "species": ["Adelie", "Adelie", "Adelie", "Gentoo", "Gentoo", "Chinstrap", "Chinstrap"],
        "island": ["Torgersen", "Torgersen", "Torgersen", "Biscoe", "Biscoe", "Dream", "Dream"],
        "bill_length_mm": [39.1, 39.5, nan, 46.1, 50.0, 46.5, 50.0],
        "bill_depth_mm": [18.7, 17.4, nan, 13.2, 16.3, 17.9, 19.5],
        "flipper_length_mm": [181.0, 186.0, nan, 211.0, 230.0, 192.0, 196.0],
        "body_mass_g": [3750.0, 3800.0, nan, 4500.0, 5700.0, 3500.0, 3900.0],
        "sex": ["MALE", "FEMALE", nan, "FEMALE", "MALE", "FEMALE", "MALE"],
    })


@pytest.fixture
def toy():
    return pd.DataFrame({"col_a": [1, 10], "col_b": [1, 20]})
