import os

from common.toml import Toml, ConfigError

DEFAULT_CONFIG_PATH = "./bytesplit.toml"

class _min_max:
    def __init__(self, min, max): # no type; can be int or float
        self.MIN = min
        self.MAX = max

def _separator(val) -> bytes:
    if not isinstance(val, str):
        raise ConfigError("[split] separator must be a string.")
    # toml basic strings already handle escapes such as "\n" or "\u0000"
    return val.encode("utf-8")

class Config:
    class _split:
        SEPARATOR = Toml.Spec("split.separator", "\n\n", _separator)
        READ_SIZE = Toml.Spec("split.read_size", 2048)
        PREPEND_SEPARATOR = Toml.Spec("split.prepend_separator", False)
        STRIP = Toml.Spec("split.strip", False)

        # hardcoded
        READ_SIZE_LIMIT = _min_max(1, 1048576)
    SPLIT = _split

    DEBUG = Toml.Spec("debug", False)

    BENCHMARK = Toml.Spec("benchmark", False)


    @staticmethod
    def load_from_toml(config_path: str | None = None, separator: bytes | None = None):
        """
        config_path: toml file; when None, ./bytesplit.toml is used if it exists, else defaults\n
        separator: overrides [split] separator, e.g. from the command line
        """
        if config_path is None and os.path.isfile(DEFAULT_CONFIG_PATH):
            config_path = DEFAULT_CONFIG_PATH

        with Toml(config_path) as t:
            t.load_to(Config)

        # setup overrides
        if separator is not None:
            Config.SPLIT.SEPARATOR = separator

        # validations
        def minmax_validate(val, limit: _min_max, text: str):
            if type(val) is not int or val < limit.MIN or val > limit.MAX:
                raise ValueError(f"Config {text} must be {limit.MIN} to {limit.MAX}.")

        minmax_validate(Config.SPLIT.READ_SIZE, Config.SPLIT.READ_SIZE_LIMIT, "[split] read_size")

        if len(Config.SPLIT.SEPARATOR) == 0:
            raise ValueError("Config [split] separator must not be empty.")

        for key, val in (
            ("[split] prepend_separator", Config.SPLIT.PREPEND_SEPARATOR),
            ("[split] strip", Config.SPLIT.STRIP),
            ("debug", Config.DEBUG),
            ("benchmark", Config.BENCHMARK)
        ):
            if type(val) is not bool:
                raise ValueError(f"Config {key} must be true or false.")
