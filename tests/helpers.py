from __future__ import annotations

from typing import Dict, Sequence, Tuple

from esper import World

from clash.components.damage import DamageType, ResistanceLevel
from clash.components.squad import Attack, Squad
from clash.factories.roster import ArmyDefinition, parse_armies
from clash.world import create_world

EXAMPLE_ROSTER = """\
Immune System:
17 units each with 5390 hit points (weak to radiation, bludgeoning) with an attack that does 4507 fire damage at initiative 2
989 units each with 1274 hit points (immune to fire; weak to bludgeoning, slashing) with an attack that does 25 slashing damage at initiative 3

Infection:
801 units each with 4706 hit points (weak to radiation) with an attack that does 116 bludgeoning damage at initiative 1
4485 units each with 2961 hit points (immune to radiation; weak to fire, cold) with an attack that does 12 slashing damage at initiative 4
"""


def make_squad(
    squad_id: int = 1,
    *,
    count: int = 10,
    hitpoints: int = 10,
    attack: int = 1,
    damage_type: DamageType = DamageType.FIRE,
    initiative: int = 1,
    resistances: Dict[DamageType, ResistanceLevel] | None = None,
) -> Squad:
    """Build a squad with small default stats for hand-checked scenarios."""
    return Squad(
        id=squad_id,
        count=count,
        hitpoints=hitpoints,
        attack=Attack(value=attack, damage_type=damage_type),
        initiative=initiative,
        resistances=dict(resistances or {}),
    )


def make_world(*forces: Tuple[str, Sequence[Squad]]) -> World:
    """Create a battle world from ``(name, squads)`` pairs."""
    return create_world([ArmyDefinition(name=name, squads=list(squads)) for name, squads in forces])


def example_world() -> World:
    return create_world(parse_armies(EXAMPLE_ROSTER))
