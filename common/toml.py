import tomllib
import inspect
from typing import Any, Callable

class ConfigError(Exception):
    ...

class Toml:
    class Spec:
        # default None means the key is required
        def __init__(self, key: str, default: Any = None, callback: Callable = None):
            self.key = key
            self.default = default
            self.callback = callback

    def __init__(self, path: str | None):
        # path None loads nothing; every Spec falls back to its default
        self._path = path
        self._root: dict[str, Any] = {}

    def __enter__(self):
        if self._path is None:
            return self

        try:
            with open(self._path, "rb") as f:
                self._root = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError("Error decoding toml file.") from e
        except OSError as e:
            raise ConfigError(f"Unable to open {self._path} toml file.") from e

        return self

    def __exit__(self, type, value, traceback):
        self._root = {}

    def load_to(self, obj: Any):
        # first load swaps each Spec for its value; keep the Specs so a later load can run again
        specs: dict[str, Toml.Spec] = obj.__dict__.get("_toml_specs")
        if specs is None:
            specs = {}
            for attr, sub in vars(obj).items():
                if not attr.startswith("_") and type(sub) is Toml.Spec:
                    specs[attr] = sub
            setattr(obj, "_toml_specs", specs)

        for attr, spec in specs.items():
            val = self.parse(spec.key, spec.default)
            if spec.callback is not None:
                val = spec.callback(val)

            setattr(obj, attr, val)

        # nested config classes are only reachable through their public alias, e.g. SPLIT = _split
        for attr, sub in vars(obj).items():
            if not attr.startswith("_") and inspect.isclass(sub):
                self.load_to(sub)

    def parse(self, key: str, default: Any = None) -> Any:
        obj = self._root
        for k in key.split("."):
            if not isinstance(obj, dict) or obj.get(k) is None:
                if default is not None:
                    return default
                raise ConfigError(f"Key '{key}' not found in toml file.")
            obj = obj[k]

        return obj
