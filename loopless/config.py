# -*- coding: utf-8 -*-

"""
********************************
Loopless Config (loopless.config)
********************************

This module reads the tutorial's configuration from file, and falls back to
defaults that let the tutorial render from a fresh checkout.

The Config object holds every configuration value for the project.
Values are reachable both as dictionary items and as attributes::

    config = Config()
    assert(config['DATA_DIR_INTERIM'] == config.DATA_DIR_INTERIM)

NOTE: The config object is a Singleton, and is only ever initialized once.
Later instances share the data of the first. Call ``Config.reset()`` to start
over (the test-suite does this between tests).

Finding the config file:
--------------------------------------------------------------------------------
The config file is searched for by starting at the current working directory
and walking up the directory tree until it hits the root. If none is found,
the defaults in ``DEFAULTS`` are used.

The file name of the config file defaults to ``loopless.config.[json|py]``.

Loading the config file:
--------------------------------------------------------------------------------
#. JSON
    All CAPITAL keys in the JSON object are imported.
#. Python
    The file is exec-ed, then all CAPITAL names are imported.

Example ``loopless.config.json``::

    {
        "DATA_DIR_INTERIM": "data/interim",
        "COMPRESSION": "gzip",
        "REPORT_PATH": "docs/index.html",
        "DISPLAY_ROWS": 6
    }

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""

# STDlib imports
import os
import logging
import json

# 3rd party package imports


_logger = logging.getLogger(__name__)


#: Values used when neither the config file nor keyword overrides set them.
DEFAULTS = {
    "DATA_DIR_INTERIM": ".",
    "COMPRESSION": None,
    "PENGUINS_URL": "https://raw.githubusercontent.com/mwaskom/seaborn-data/master/penguins.csv",
    "REPORT_PATH": "loopless.html",
    "DISPLAY_ROWS": 10,
    "LOG_LEVEL": "WARNING",
}


class Config:
    """
    The config object for the tutorial, which has config values as both
    dictionary items as well as attributes.
    """

    # Borg pattern: every instance shares this dict as its __dict__, so an
    # update through one instance is seen by all of them.
    __borg_data = {}

    __is_initialized = False

    def __init__(self, config_name=None, config_path=None, **kwargs):
        """
        Create config object. Keyword arguments override both the defaults and
        the values found in the config file.

        Args:
            config_name: name of config file. Name can include or exclude
                ``.json`` or ``.py``, both are tried (in that order)
                if ``config_name`` alone isn't found.
            config_path: Full path of the config file. If this is provided,
                ``config_name`` is ignored.
            **kwargs: Optional overrides, of which only the CAPITAL keys are
                kept.
        """
        self.__dict__ = self.__borg_data

        if not self.__is_initialized:
            _logger.debug("Config loading.")

            self._populate_from_dict(DEFAULTS)

            self.config_path = config_path or self._get_config_path(config_name)
            _logger.debug("\tconfig_name: %s", config_name)
            _logger.debug("\tself.config_path: %s", self.config_path)

            self._populate_from_file(self.config_path, silent=True)

            self._populate_from_dict(kwargs)
            if kwargs:
                _logger.debug("\tLoaded from kwargs: %r", kwargs)

            self.__is_initialized = True
            _logger.debug("\tDone initialization: %r", self)

    @classmethod
    def reset(cls):
        """Forget all shared config data, so the next ``Config()`` reloads."""
        cls.__borg_data.clear()

    def get(self, key, default=None):
        return getattr(self, key, default)

    def __getitem__(self, key):
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key) from None

    def __setitem__(self, key, value):
        setattr(self, key, value)

    def __contains__(self, key):
        return key in self.__dict__

    def __repr__(self):
        return "Config loaded from: {}\nKeys: {}".format(
            self.config_path, [k for k in self.__dict__.keys() if k.isupper()]
        )

    def _get_config_path(self, config_name=None):
        """
        Find the config file by name, starting in the current working directory
        and walking up the tree until the root.

        Args:
            config_name: name of config file, default ``loopless.config``.
                ``.json`` and ``.py`` are tried (in that order) if the bare
                name isn't found.

        Returns:
            Path of the found config file, or None.
        """
        if config_name is None:
            config_name = "loopless.config"

        extension_order = ("", ".json", ".py")

        last_dir = None
        this_dir = os.path.abspath(os.getcwd())

        while last_dir != this_dir:
            for ext in extension_order:
                check_path = os.path.join(this_dir, config_name + ext)
                if os.path.isfile(check_path):
                    return check_path
            _logger.debug("No %r config in %r", config_name, this_dir)

            last_dir, this_dir = this_dir, os.path.dirname(this_dir)

        return None

    def _get_dict_from_file(self, config_path, **kwargs):
        """
        Make a dictionary from a python or json file, based on extension.
        Only includes keys which are CAPITALIZED.

        A python config file sees its own path as ``config_path``.

        NOTE: A python config file is ``exec``-ed. Don't load one you haven't
        read.

        Args:
            config_path: Full path of the config file.
            **kwargs: Optional read-arguments passed to ``open``.
        Returns:
            dict: KEY:value pairs for every CAPITALIZED key in the file.
        Raises:
            ValueError: If the config file doesn't have .json or .py extension.
        """
        if config_path is None:
            return {}

        ext = os.path.splitext(config_path)[-1]

        if ext == ".json":
            _logger.debug("Loading json config from %r", config_path)
            with open(config_path, mode="r", **kwargs) as fh:
                obj = json.load(fh)
        elif ext == ".py":
            _logger.debug("Loading python config from %r", config_path)
            with open(config_path, mode="rb", **kwargs) as fh:
                obj = {"config_path": config_path}
                exec(compile(fh.read(), config_path, "exec"), obj)
        else:
            raise ValueError("Config file extension unrecognized. Expected .json or .py, got {!r}".format(ext))

        return {k: v for k, v in obj.items() if k.isupper()}

    def _populate_from_file(self, config_path=None, silent=False, **kwargs):
        """
        Populate the Config from a python or json file, based on extension.

        Args:
            config_path: Full path of the config file.
            silent: if True, a missing file is logged instead of raised.
            **kwargs: Optional read-arguments passed to ``open``.
        Returns:
            dict: Dictionary which was added to the Config object.
        Raises:
            FileNotFoundError: If file isn't found, and ``silent`` is False.
            ValueError: If the config file doesn't have .json or .py extension.
        """
        try:
            obj = self._get_dict_from_file(config_path=config_path, **kwargs)
        except FileNotFoundError:
            _logger.warning("Load Config error: file not found: %s", config_path)
            if not silent:
                raise
            obj = {}

        return self._populate_from_dict(obj)

    def _populate_from_dict(self, config_dict):
        """
        Populate the Config from a dictionary, keeping only CAPITAL keys.

        Returns:
            dict: Dictionary which was added to the Config object.
        """
        obj = {}
        for k, v in config_dict.items():
            if k.isupper():
                self[k] = obj[k] = v

        return obj
