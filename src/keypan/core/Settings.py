from typing import Dict, List, Any
from pathlib import Path
import copy
import numbers

import tomllib
import tomli_w

from keypan.core.dataclasses import Direction


class Settings:
    DEFAULTS: Dict[str, Any] = {
        "keys": {
            Direction.NORTH.value: "w",
            Direction.WEST.value: "a",
            Direction.SOUTH.value: "s",
            Direction.EAST.value: "d",
        },
        "max_speed": 250,
        "video": {
            "width": 1280,
            "height": 720,
            "fullscreen": False,
        },
        "timing": {
            "main_loop_fps": 60,
        },
        "settings": {
            "title": "keypan",
        },
    }

    def __init__(self, path: str = "settings.toml") -> None:
        self.path = Path(path)
        self.settings = {}
        self.load()

    def load(self) -> None:
        if self.path.exists():
            with self.path.open("rb") as file:
                raw = tomllib.load(file)
                loaded = self._deserialize(raw)
                self.settings = self._merge(copy.deepcopy(self.DEFAULTS), loaded)
        else:
            self.settings = copy.deepcopy(self.DEFAULTS)

    def save(self) -> None:
        serialized = self._serialize(self.settings)
        with self.path.open("wb") as f:
            f.write(tomli_w.dumps(serialized).encode("utf-8"))

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def delete(self, key: str) -> None:
        if key in self.settings:
            del self.settings[key]

    def get_bindings(self) -> Dict[Direction, str]:
        keys = self.settings.get("keys", {})
        return {direction: keys.get(direction.value, "") for direction in Direction}

    def set_bindings(self, bindings: Dict[Direction, str]) -> None:
        self.settings["keys"] = {
            direction.value: bindings[direction] for direction in Direction
        }

    def get_max_speed(self) -> float:
        return self.settings.get("max_speed", self.DEFAULTS["max_speed"])

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _serialize(self, data: Dict[str, Any]) -> Dict[str, Any] | List[Any]:
        return self._remove_none(data)

    def _remove_none(self, obj: object) -> Dict[str, Any] | List[Any] | object:
        if isinstance(obj, dict):
            return {k: self._remove_none(v) for k, v in obj.items() if v is not None}
        elif isinstance(obj, list):
            return [self._remove_none(v) for v in obj if v is not None]
        else:
            return obj

    def _deserialize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if "keys" in data:
            data = data.copy()
            data["keys"] = self._deserialize_keys(data["keys"])

        if "max_speed" in data:
            speed = data["max_speed"]
            if isinstance(speed, bool) or not isinstance(speed, numbers.Real):
                raise ValueError(f"Invalid max_speed in config: {speed!r}")

        return data

    def _deserialize_keys(self, keys: Dict[str, Any]) -> Dict[str, str]:
        valid = {direction.value for direction in Direction}
        for name, keyname in keys.items():
            if name not in valid:
                raise ValueError(f"Unknown direction in config: {name}")

            if not isinstance(keyname, str) or not keyname:
                raise ValueError(f"Invalid key name in config: {keyname!r}")

        return dict(keys)
