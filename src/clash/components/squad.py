from dataclasses import dataclass, field
from typing import Dict, Optional

from clash.components.damage import DamageType, ResistanceLevel, damage_multiplier


class CombatInvariantError(RuntimeError):
    """Raised when combat rules are broken by the caller (e.g. striking a dead squad)."""


@dataclass
class Attack:
    value: int
    damage_type: DamageType


@dataclass
class Squad:
    """Represents a group of identical units fighting for one force.

    Fields:
        id: 1-based position of the squad in its force's roster. Display only.
        count: Surviving units. The squad is dead once this reaches 0.
        hitpoints: Hit points of each unit; fixed for the squad's lifetime.
        attack: Per-unit attack value and damage type. The value may be raised
            once by a boost before a battle starts.
        initiative: Decides target selection ties and strike order.
        resistances: Weak/immune damage types. Types not listed are normal.
        owner_id: Entity id of the owning Force, filled in when spawned.
    """
    id: int
    count: int
    hitpoints: int
    attack: Attack
    initiative: int
    resistances: Dict[DamageType, ResistanceLevel] = field(default_factory=dict)
    owner_id: Optional[int] = None

    def is_alive(self) -> bool:
        return self.count > 0

    def effective_power(self) -> int:
        return self.count * self.attack.value

    def resistance_to(self, damage_type: DamageType) -> ResistanceLevel:
        return self.resistances.get(damage_type, ResistanceLevel.NORMAL)

    def predicted_damage_from(self, attacker: "Squad") -> int:
        """Damage ``attacker`` would deal to this squad right now."""
        level = self.resistance_to(attacker.attack.damage_type)
        return attacker.effective_power() * damage_multiplier(level)

    def apply_damage(self, amount: int) -> int:
        """Remove whole units worth of ``amount`` damage and return how many died."""
        if self.hitpoints <= 0:
            raise CombatInvariantError(f"Squad {self.id} has non-positive hit points")
        killed = amount // self.hitpoints
        if killed >= self.count:
            killed = self.count
            self.count = 0
        else:
            self.count -= killed
        return killed

    def receive_attack_from(self, attacker: "Squad") -> int:
        if not self.is_alive():
            raise CombatInvariantError(f"Squad {self.id} is already destroyed")
        return self.apply_damage(self.predicted_damage_from(attacker))
