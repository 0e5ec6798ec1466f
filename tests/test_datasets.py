import os

import pytest

from loopless.config import Config
from loopless.data import MTCars, Penguins, load_mtcars, load_penguins
from loopless.data.datasets import PENGUIN_MEASUREMENTS


def test_mtcars_shape_and_values():
    mtcars = load_mtcars()
    assert mtcars.shape == (32, 12)
    assert mtcars.columns[0] == "model"
    assert mtcars["mpg"].mean() == pytest.approx(20.090625)
    assert mtcars.set_index("model").loc["Mazda RX4", "hp"] == 110
    assert mtcars.drop(columns="model").notna().all().all()


def test_mtcars_copies_are_independent():
    a = load_mtcars()
    a.loc[0, "mpg"] = -1
    assert load_mtcars().loc[0, "mpg"] == 21.0


def test_mtcars_cache():
    cars = MTCars()
    assert cars.data.shape == (32, 12)
    assert os.path.exists("mtcars.csv")


def test_load_mtcars_reads_through_the_cache(tmp_path):
    Config(DATA_DIR_INTERIM=str(tmp_path / "interim"))
    assert not MTCars().is_cached
    load_mtcars()
    assert MTCars().is_cached

    # A later load comes from the cached file, not the bundled copy
    cars = MTCars()
    cached = cars.read()
    cached.loc[0, "mpg"] = 99.0
    cars.write(cached, overwrite_cache=True)
    assert load_mtcars().loc[0, "mpg"] == 99.0


@pytest.fixture
def penguins_url(tmp_path, penguins):
    """Point the download at a local csv."""
    path = tmp_path / "source" / "penguins.csv"
    path.parent.mkdir()
    penguins.to_csv(path, index=False)
    Config(PENGUINS_URL=str(path), DATA_DIR_INTERIM=str(tmp_path / "interim"))
    return path


def test_penguins_downloaded_then_cached(penguins_url, penguins):
    first = load_penguins()
    assert first.shape == penguins.shape
    assert Penguins().is_cached

    os.remove(penguins_url)
    second = load_penguins()
    assert second["species"].tolist() == penguins["species"].tolist()


def test_penguin_measurements_are_float(penguins_url):
    df = load_penguins()
    for c in PENGUIN_MEASUREMENTS:
        assert df[c].dtype == float
    assert df["bill_length_mm"].isna().sum() == 1
