from typing import List, Tuple
from esper import World
from .battle_outcome import BattleOutcome
from .force import Force
from .squad import Squad

def get_forces(world: World) -> List[Tuple[int, Force]]:
    """Return all force entities ordered by creation (roster order)."""
    return sorted(world.get_component(Force), key=lambda entry: entry[0])

def force_by_name(world: World, name: str) -> int:
    """Return the entity of the force called ``name``."""
    for ent, force in get_forces(world):
        if force.name == name:
            return ent
    raise KeyError(f"Unknown force '{name}'")

def get_squads_for_force(world: World, force_entity: int) -> List[Tuple[int, Squad]]:
    """Return squads listed on the force, in roster order."""
    force = world.component_for_entity(force_entity, Force)
    return [(ent, world.component_for_entity(ent, Squad)) for ent in force.squad_entities]

def get_or_create_outcome(world: World) -> BattleOutcome:
    """Return the shared BattleOutcome component, creating it if absent."""
    existing = list(world.get_component(BattleOutcome))
    if existing:
        return existing[0][1]
    outcome = BattleOutcome()
    world.create_entity(outcome)
    return outcome
