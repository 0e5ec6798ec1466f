import numpy as np
import pandas as pd
import pytest

from loopless.processing import indexed_loop, map_list, map_typed


TEMPLATE = "My favorite animal is the {}"


class TestIndexedLoop:
    def test_animals(self):
        assert indexed_loop(["pika", "fox", "octopus"], TEMPLATE) == [
            "My favorite animal is the pika",
            "My favorite animal is the fox",
            "My favorite animal is the octopus",
        ]

    def test_empty(self):
        assert indexed_loop([], TEMPLATE) == []

    def test_progress_bar_same_result(self):
        animals = ["pika", "fox", "octopus"]
        assert indexed_loop(animals, TEMPLATE, progress=True) == indexed_loop(animals, TEMPLATE)

    def test_series_uses_position_not_label(self):
        s = pd.Series(["pika", "fox"], index=[10, 20])
        assert indexed_loop(s, "{}!") == ["pika!", "fox!"]


class TestMapList:
    def test_list(self):
        assert map_list([1, 2, 3], lambda x: x * 10) == [10, 20, 30]

    def test_dataframe_by_column(self):
        df = pd.DataFrame({"a": [1, 2], "b": [3, 4]})
        assert map_list(df, lambda col: col.sum()) == {"a": 3, "b": 7}

    def test_dict(self):
        assert map_list({"x": "ab", "y": "c"}, len) == {"x": 2, "y": 1}


class TestMapTyped:
    def test_float_over_columns(self):
        df = pd.DataFrame({"mpg": [20.0, 30.0], "cyl": [4, 8]})
        out = map_typed(df, lambda col: col.mean(), "float")
        assert out.dtype == np.float64
        assert out.to_dict() == {"mpg": 25.0, "cyl": 6.0}

    def test_int(self):
        out = map_typed(["a", "bcd"], len, "int")
        assert out.tolist() == [1, 3]
        assert out.dtype == np.int64

    def test_str_and_bool(self):
        assert map_typed([1, 2], str, "str").tolist() == ["1", "2"]
        assert map_typed([1, 2], lambda x: x > 1, "bool").tolist() == [False, True]

    def test_empty(self):
        assert len(map_typed([], str, "str")) == 0

    @pytest.mark.parametrize("values,fn,dtype", [
        (["a", "b"], lambda x: x, "float"),
        ([1.5], lambda x: x, "int"),
        ([True], lambda x: x, "int"),
        ([1], lambda x: x, "str"),
        ([1], lambda x: x, "bool"),
    ])
    def test_wrong_type(self, values, fn, dtype):
        with pytest.raises(TypeError):
            map_typed(values, fn, dtype)

    def test_unknown_dtype(self):
        with pytest.raises(ValueError):
            map_typed([1], str, "complex")
