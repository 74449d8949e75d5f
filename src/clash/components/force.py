from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Force:
    """Named side of a battle tracking its squad entities in roster order."""

    name: str
    squad_entities: List[int] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.squad_entities
