"""Force level helpers shared by the round, battle and boost systems."""
from __future__ import annotations

from typing import List, Tuple

from esper import World

from clash.components.force import Force
from clash.components.squad import Squad
from clash.components.squads_query import get_squads_for_force


def living_squads(world: World, force_entity: int) -> List[Tuple[int, Squad]]:
    return [(ent, squad) for ent, squad in get_squads_for_force(world, force_entity) if squad.is_alive()]


def total_units(world: World, force_entity: int) -> int:
    """Sum of surviving unit counts across the force."""
    return sum(squad.count for _, squad in get_squads_for_force(world, force_entity))


def apply_boost(world: World, force_entity: int, amount: int) -> None:
    """Raise every squad's attack value by ``amount``.

    Only called on a freshly cloned world before its battle starts.
    """
    for _, squad in get_squads_for_force(world, force_entity):
        squad.attack.value += amount


def remove_dead_squads(world: World, force_entity: int) -> List[Tuple[int, Squad]]:
    """Drop destroyed squads from the force and the world, keeping survivor order.

    Returns the removed ``(entity, squad)`` pairs.
    """
    force = world.component_for_entity(force_entity, Force)
    survivors: List[int] = []
    removed: List[Tuple[int, Squad]] = []
    for ent in force.squad_entities:
        squad = world.component_for_entity(ent, Squad)
        if squad.is_alive():
            survivors.append(ent)
        else:
            removed.append((ent, squad))
    force.squad_entities = survivors
    for ent, _ in removed:
        world.delete_entity(ent, immediate=True)
    return removed
