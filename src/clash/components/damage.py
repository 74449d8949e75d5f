"""Damage types and resistance levels shared by every squad."""
from enum import Enum


class DamageType(Enum):
    """Closed set of attack damage types, valued by their roster token."""
    RADIATION = "radiation"
    COLD = "cold"
    BLUDGEONING = "bludgeoning"
    FIRE = "fire"
    SLASHING = "slashing"

    @classmethod
    def from_token(cls, token: str) -> "DamageType":
        try:
            return cls(token.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unrecognized damage type '{token}'") from exc


class ResistanceLevel(Enum):
    NORMAL = "normal"
    WEAK = "weak"
    IMMUNE = "immune"


_MULTIPLIERS = {
    ResistanceLevel.NORMAL: 1,
    ResistanceLevel.WEAK: 2,
    ResistanceLevel.IMMUNE: 0,
}


def damage_multiplier(level: ResistanceLevel) -> int:
    """Scale factor applied to incoming damage for a resistance level."""
    return _MULTIPLIERS[level]
