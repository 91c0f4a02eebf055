"""
Module for ``pcs``'s configuration.

This module can be used to:

* define default configuration settings
* load a configuration from JSON or from the environment
* build the random source a configuration asks for
"""

import json
import logging
import os

from pcs.rand import SeededRandomSource, SystemRandomSource


class ConfigVars(object):
    MaxDegree = "max_degree"
    Seed = "seed"
    LogLevel = "log_level"


class PCSConfig(object):
    """Settings for a setup run.

    ``seed`` is for reproducible demos and tests only; leave it ``None`` to
    draw the toxic waste from the system CSPRNG.
    """

    ENV_PREFIX = "PCS_"

    def __init__(self, max_degree, seed=None, log_level=logging.INFO):
        self.max_degree = max_degree
        self.seed = seed
        self.log_level = log_level

    @classmethod
    def default(cls):
        return cls(max_degree=16, seed=None, log_level=logging.INFO)

    @classmethod
    def from_dict(cls, config):
        res = cls.default()
        if ConfigVars.MaxDegree in config:
            res.max_degree = int(config[ConfigVars.MaxDegree])
        if ConfigVars.Seed in config:
            res.seed = config[ConfigVars.Seed]
        if ConfigVars.LogLevel in config:
            res.log_level = _parse_level(config[ConfigVars.LogLevel])
        return res

    @classmethod
    def from_json(cls, json_config):
        if isinstance(json_config, str):
            json_config = json.loads(json_config)
        return cls.from_dict(json_config)

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        config = {}
        for key in (ConfigVars.MaxDegree, ConfigVars.Seed, ConfigVars.LogLevel):
            name = cls.ENV_PREFIX + key.upper()
            if name in environ:
                config[key] = environ[name]
        return cls.from_dict(config)

    def random_source(self):
        if self.seed is None:
            return SystemRandomSource()
        return SeededRandomSource(self.seed)

    def __repr__(self):
        return (
            f"PCSConfig(max_degree={self.max_degree}, seed={self.seed!r}, "
            f"log_level={logging.getLevelName(self.log_level)})"
        )


def _parse_level(level):
    if isinstance(level, int):
        return level
    if str(level).isdigit():
        return int(level)
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value
