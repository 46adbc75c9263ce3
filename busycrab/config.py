"""BusyCrab configuration.

Values come from, in increasing priority: dataclass defaults, the JSON
config file, and command-line flags.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "busycrab" / "config.json"


@dataclass
class BusyCrabConfig:
    """Runtime settings."""
    # Activity
    interval: int = 60          # seconds between activity cycles
    wiggle: int = 3             # pixels the mouse moves each cycle
    wiggle_pause: float = 0.1   # seconds between the move out and back
    poll_slice: float = 0.2     # shutdown check granularity while waiting

    # Animation
    motion: str = "crab"
    frame_interval: float = 0.05

    verbose: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "BusyCrabConfig":
        """Build from a dict, ignoring unknown keys.

        Values of the wrong type are dropped with a warning so the
        default applies.
        """
        if not isinstance(d, dict):
            return cls()
        defaults = cls()
        values = {}
        for f in fields(cls):
            if f.name not in d:
                continue
            value = _check_type(f.name, d[f.name], getattr(defaults, f.name))
            if value is not None:
                values[f.name] = value
        return cls(**values)

    def merged(self, overrides: dict[str, Any]) -> "BusyCrabConfig":
        """Copy with every non-None value of *overrides* applied."""
        values = self.to_dict()
        values.update({k: v for k, v in overrides.items() if v is not None and k in values})
        return BusyCrabConfig(**values)

    def save(self, path: Path = CONFIG_PATH) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        temp = path.with_suffix(".tmp")
        temp.write_text(json.dumps(self.to_dict(), indent=2))
        temp.rename(path)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "BusyCrabConfig":
        """Load from *path*, falling back to defaults if missing or invalid."""
        path = path or CONFIG_PATH
        try:
            if path.exists():
                return cls.from_dict(json.loads(path.read_text()))
        except (ValueError, OSError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
        return cls()


def _check_type(name: str, value: Any, default: Any) -> Any:
    """*value* converted to the type of *default*, or None if it does not fit.

    bool is never accepted for a number, and an int is accepted for a float.
    """
    kind = type(default)
    if isinstance(value, bool) != (kind is bool):
        ok = False
    elif kind is float:
        ok = isinstance(value, (int, float))
    else:
        ok = isinstance(value, kind)

    if not ok:
        logger.warning(
            "Ignoring config value %s=%r (expected %s)", name, value, kind.__name__
        )
        return None
    return kind(value)
