# config_manager.py - JSON config manager for pipeline settings

import json
import os
from typing import Any, Dict

from typing_extensions import TypedDict

from word_frequency.core.pipeline import WordFrequencySettings
from word_frequency.text import DEFAULT_PUNCTUATION

DEFAULT_CONFIG_PATH = "word_frequency.json"


class ConfigData(TypedDict):
    chunk_size: int
    punctuation: str
    max_workers: int
    on_whitespace: bool


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _coerce(current: Any, val: Any) -> Any:
    """Convert `val` to the type of the existing option value."""
    if val is None:
        raise ValueError("option value must not be null")
    if isinstance(current, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    if isinstance(current, int):
        if isinstance(val, bool) or (isinstance(val, float) and not val.is_integer()):
            raise ValueError(f"not an integer: {val!r}")
        return int(val)
    if isinstance(current, str) and not isinstance(val, str):
        raise ValueError(f"not a string: {val!r}")
    return type(current)(val)


class Config:
    def __init__(self, path: str = DEFAULT_CONFIG_PATH):
        self.path = path
        self.data: ConfigData = {
            "chunk_size": 100,
            "punctuation": DEFAULT_PUNCTUATION,
            "max_workers": 4,
            "on_whitespace": False,
        }
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        with open(self.path, "r", encoding="utf8") as f:
            raw: Dict[str, Any] = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"{self.path}: config must be a JSON object, got {type(raw).__name__}")
        for k, v in raw.items():
            if k in self.data:
                self.data[k] = _coerce(self.data[k], v)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v!r}")

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce(self.data[key], val)
        self.save()

    def settings(self, **overrides) -> WordFrequencySettings:
        """Settings built from the config, with non-None overrides applied on top."""
        values = dict(self.data)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return WordFrequencySettings(**values)
