import os

import pandas as pd
import pytest

from loopless.config import Config
from loopless.data.cache import DataFrameCache


EXPECTED = pd.DataFrame({"a": [1, 2], "b": ["x", "y"]})


class Counting(DataFrameCache):
    calls = 0

    def make_dataset(self):
        Counting.calls += 1
        return EXPECTED.copy()


@pytest.fixture(autouse=True)
def reset_counter():
    Counting.calls = 0


class TestPaths:
    def test_default_name_and_directory(self):
        c = Counting()
        assert c.path == os.path.join(".", "Counting.csv")

    def test_config_directory(self, tmp_path):
        Config(DATA_DIR_INTERIM=str(tmp_path / "interim"))
        assert Counting().path == os.path.join(str(tmp_path / "interim"), "Counting.csv")

    def test_override_filename(self):
        assert Counting(override_filename="other").path.endswith("other.csv")

    def test_tab_format(self):
        class Tabbed(Counting):
            file_format = "tab"

        c = Tabbed()
        assert c.path.endswith("Tabbed.tab")
        assert c.read_args["sep"] == "\t"
        # The class keeps its own args
        assert "sep" not in Counting.read_args

    def test_compression_from_config(self):
        Config(COMPRESSION="gzip")
        c = Counting()
        assert c.path.endswith("Counting.csv.gz")
        pd.testing.assert_frame_equal(c.data, EXPECTED)

    def test_unknown_format(self):
        class Parquet(Counting):
            file_format = "parquet"

        with pytest.raises(ValueError):
            Parquet()


def test_args_merge_down_the_hierarchy():
    class WithNA(DataFrameCache):
        read_args = {"na_values": ["NA"]}

    class Child(WithNA):
        read_args = {"sep": ";"}

    assert WithNA.write_args == {"index": False}
    assert Child.read_args == {"na_values": ["NA"], "sep": ";"}


class TestReadWrite:
    def test_builds_once(self):
        c = Counting()
        assert not c.is_cached
        pd.testing.assert_frame_equal(c.data, EXPECTED)
        assert c.is_cached
        assert Counting.calls == 1

        pd.testing.assert_frame_equal(Counting().data, EXPECTED)
        assert Counting.calls == 1

    def test_tab_file_contents(self):
        class Tabbed(Counting):
            file_format = "tab"

        c = Tabbed()
        c.data
        with open(c.path) as fh:
            assert fh.readline().strip() == "a\tb"

    def test_write_none(self):
        with pytest.raises(ValueError):
            Counting().write(None)

    def test_write_does_not_overwrite(self):
        c = Counting()
        c.data
        c.write(pd.DataFrame({"a": [9], "b": ["z"]}))
        pd.testing.assert_frame_equal(c.read(), EXPECTED)

        c.write(pd.DataFrame({"a": [9], "b": ["z"]}), overwrite_cache=True)
        assert c.read()["a"].tolist() == [9]

    def test_make_dataset_required(self):
        with pytest.raises(NotImplementedError):
            DataFrameCache().data


class TestDeleteCache:
    def test_delete(self):
        c = Counting()
        c.data
        c.delete_cache(backup=False)
        assert not c.is_cached
        # Deleting again is fine
        c.delete_cache(backup=False)

    def test_backup_with_name(self):
        c = Counting()
        c.data
        c.delete_cache(backup="old")
        assert not c.is_cached
        assert os.path.exists("Counting.old.csv")

    def test_backup_true(self):
        c = Counting()
        c.data
        c.delete_cache(backup=True)
        assert os.path.exists("Counting.backup.csv")

    def test_delete_on_init_rebuilds(self):
        Counting().data
        c = Counting(delete_cache="old")
        assert not c.is_cached
        c.data
        assert Counting.calls == 2
