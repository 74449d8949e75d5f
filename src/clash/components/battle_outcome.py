"""Battle outcome resource describing how the latest battle ended."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class BattleStatus(Enum):
    """Terminal and non-terminal states of the battle loop."""
    ONGOING = auto()
    FIRST_FORCE_WINS = auto()
    SECOND_FORCE_WINS = auto()
    STALEMATE = auto()


@dataclass
class BattleOutcome:
    """Singleton component storing the result of the most recent battle."""
    status: BattleStatus = BattleStatus.ONGOING
    winner: Optional[str] = None
    survivors: int = 0
    rounds: int = 0

    def is_decisive(self) -> bool:
        return self.status in (BattleStatus.FIRST_FORCE_WINS, BattleStatus.SECOND_FORCE_WINS)

    def is_stalemate(self) -> bool:
        return self.status is BattleStatus.STALEMATE
