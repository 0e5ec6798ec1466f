# -*- coding: utf-8 -*-

"""
********************************
loopless.data.cache
********************************

This module contains the DataFrameCache object, which keeps an example dataset
on disk so the tutorial only builds (or downloads) it once.

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""
# STDlib imports
import os
import logging
import datetime as dt
from pathlib import Path
from typing import Union

# 3rd party package imports
import pandas as pd

# project imports
from loopless.config import Config


# Local _logger
_logger = logging.getLogger(__name__)


class ReadWriteArgCopyToDescendants(type):
    """
    Merge ``read_args`` and ``write_args`` down the class hierarchy, so a
    subclass only lists the arguments it adds.

    Example::

        class Base(metaclass=ReadWriteArgCopyToDescendants):
            read_args = {'sep': '\t'}

        class Child(Base):
            read_args = {'na_values': ['NA']}

        assert Child.read_args == {'sep': '\t', 'na_values': ['NA']}
        assert Child.write_args == {}
    """

    def __new__(cls, name, bases, attrs):
        new_class = super().__new__(cls, name, bases, attrs)

        for argname in ("read_args", "write_args"):
            merged = {}
            for bc in bases + (new_class,):
                merged.update(getattr(bc, argname, {}))
            setattr(new_class, argname, merged)

        return new_class


class DataFrameCache(metaclass=ReadWriteArgCopyToDescendants):
    """
    Base class for a dataset cached on disk as delimited text.

    Default write args: index=False

    Suggested subclassing::

        class Penguins(DataFrameCache):
            filename = 'penguins'

            def make_dataset(self):
                return pd.read_csv(Config().PENGUINS_URL)
    """

    # Resultant path of the file
    path: Union[str, Path] = None
    #: Override directory to store the dataset in.
    override_directory: Union[str, Path] = None
    #: Override filename to name the dataset.
    filename: str = None
    #: DataFrame of the data
    df: "pd.DataFrame" = None

    # Merged into every subclass by the metaclass.
    file_format: str = "csv"
    write_args: dict = {"index": False}
    read_args: dict = {}

    def __init__(self, override_filename: str = None, delete_cache: Union[bool, str] = False):
        """
        Create new cache object. Sets the following attributes:

          * `filename`: Name of the dataset file. Takes first non-missing from:
            1. `override_filename` argument
            2. `self.filename`
            3. `self.__class__.__name__`
          * `path`: Full path to save dataset at. Directory is the first
            non-missing of `self.override_directory`,
            `Config().DATA_DIR_INTERIM` and `.`

        The extension follows `file_format` (csv, tab, tsv) plus the
        compression suffix, where compression comes from `write_args` /
        `read_args`, else `Config().COMPRESSION`.

        Args:
            override_filename (str): Filename to write the dataset to,
                overriding the default. Ignored if equal to `None`.
            delete_cache (bool | str): Delete the cache if it exists. A string
                backs the old file up with that suffix ('date' uses its
                modified date).
        """
        # Instance copies, so changing them here leaves the class alone.
        self.read_args = dict(self.read_args)
        self.write_args = dict(self.write_args)

        compression = Config().get("COMPRESSION", None)
        self.compression = {**self.write_args, **self.read_args}.get("compression", compression)

        if self.file_format not in ("csv", "tab", "tsv"):
            raise ValueError(f"{self.__class__.__name__}: unknown file_format {self.file_format!r}")

        self.extension = self.file_format
        if self.file_format in ("tab", "tsv"):
            self.write_args["sep"] = "\t"
            self.read_args["sep"] = "\t"
        elif self.write_args.get("sep", ",") == "\t":
            self.extension = "tab"
            self.read_args["sep"] = "\t"

        if self.compression is not None:
            self.write_args["compression"] = self.compression
            self.read_args["compression"] = self.compression
        if self.compression == "gzip":
            self.extension += ".gz"
        elif self.compression in ("bz2", "zip", "xz"):
            self.extension += "." + self.compression

        if override_filename is not None:
            self.filename = override_filename
        if not self.filename:
            self.filename = self.__class__.__name__

        if self.override_directory:
            data_dir = self.override_directory
        else:
            data_dir = Config().get("DATA_DIR_INTERIM", None) or "."
        self.path = os.path.join(data_dir, f"{self.filename}.{self.extension}")

        _logger.debug("file_format: %r, path: %r", self.file_format, self.path)
        _logger.debug("write_args: %r", self.write_args)
        _logger.debug("read_args: %r", self.read_args)

        if delete_cache:
            self.delete_cache(backup=delete_cache)

    def make_dataset(self) -> "pd.DataFrame":
        """
        Make dataset to be saved to cache.

        Should return a dataframe.
        """
        raise NotImplementedError

    @property
    def data(self) -> "pd.DataFrame":
        """
        The cached dataframe, built with `make_dataset()` on first use.
        """
        if not self.is_cached:
            _logger.debug("Cached file not found, creating new dataset.")
            self.write(self.make_dataset())

        if self.df is None:
            _logger.debug("Cached file found, reading dataset.")
            self.df = self.read()

        return self.df

    def read(self, read_args=None) -> "pd.DataFrame":
        """
        Read df from cache.

        Args:
            read_args (dict): Arguments for `pandas.read_csv`, overriding those
                in `self.read_args`.

        Returns:
            pandas.DataFrame: the cached data, passed through `_post_read_hook`.
        """
        kwargs = {**self.read_args, **(read_args or {})}
        return self._post_read_hook(pd.read_csv(self.path, **kwargs))

    def write(self, df, overwrite_cache=False, write_args=None) -> "pd.DataFrame":
        """
        Write df to cache.

        Args:
            df (pandas.DataFrame): DataFrame to be written to disk.
            overwrite_cache (bool): Replace an existing cache file.
            write_args (dict): Arguments for `DataFrame.to_csv`, overriding
                those in `self.write_args`.
        """
        if df is None:
            raise ValueError(f"{self.__class__.__name__}.write: Requires df input as first argument.")

        if self.is_cached and not overwrite_cache:
            _logger.debug("Not writing %r to disk as it already exists.", self.path)
            return df

        data_dir = os.path.dirname(self.path)
        if data_dir:
            os.makedirs(data_dir, exist_ok=True)

        kwargs = {**self.write_args, **(write_args or {})}
        _logger.info("Writing %s rows to %r", len(df), self.path)
        df.to_csv(self.path, **kwargs)
        self.df = None

        return df

    def _post_read_hook(self, df: "pd.DataFrame") -> "pd.DataFrame":
        return df

    def delete_cache(self, backup="date") -> None:
        """
        Delete the cached file if it exists.

        Args:
            backup (bool | str): False deletes the file. True renames it with a
                '.backup' suffix, 'date' with its modified date, and any other
                string with that string.
        """
        self.df = None
        if not backup:
            try:
                _logger.debug("Deleting cache file %r", self.path)
                os.remove(self.path)
            except FileNotFoundError:
                pass
            return

        if not self.is_cached:
            return

        if backup == "date":
            backup = dt.datetime.fromtimestamp(Path(self.path).stat().st_mtime).strftime("%Y-%m-%d")
        elif backup is True:
            backup = "backup"

        _ext = "." + self.extension
        _newp = str(self.path)[: -len(_ext)] + f".{backup}{_ext}"
        _logger.debug("Backing up cache file %r to %r", self.path, _newp)
        os.replace(self.path, _newp)

    @property
    def is_cached(self) -> bool:
        """
        Boolean value for whether cached file exists at `path`.
        """
        return os.path.exists(self.path)
