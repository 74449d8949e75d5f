"""Battle configuration.

Settings can be given in code or loaded from a JSON file such as::

    {"helped_force": "Immune System", "boost_start": 0, "trace": false}
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import json
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class BattleConfig:
    helped_force: Optional[str] = None  # None means the first force in the roster
    boost_start: int = 0
    trace: bool = False
    log_boost_trials: bool = True

    def __post_init__(self) -> None:
        if self.boost_start < 0:
            raise ValueError(f"boost_start must be non-negative, got {self.boost_start}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BattleConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown battle config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: Path | str) -> BattleConfig:
    data = json.loads(Path(path).read_text())
    return BattleConfig.from_dict(data)
