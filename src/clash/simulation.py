from __future__ import annotations

from dataclasses import dataclass
from copy import deepcopy
from typing import Dict, Iterable, Tuple

from esper import World

from clash.components.battle_outcome import BattleOutcome
from clash.components.force import Force
from clash.components.squad import Squad
from clash.events.bus import EventBus

DEFAULT_COMPONENTS: Tuple[type, ...] = (
    BattleOutcome,
    Force,
    Squad,
)


@dataclass(slots=True)
class CloneState:
    """Container for cloned simulation state."""

    world: World
    event_bus: EventBus
    entity_map: Dict[int, int]


def clone_world_state(world: World, components: Iterable[type] | None = None) -> CloneState:
    """Create an independent copy of a battle world.

    Every component is deep copied and entity references are remapped, so
    damage and boosts applied to the clone never reach the source world.
    A fresh ``EventBus`` is created for the clone so that trial events stay
    isolated from any listeners on the source world.
    """

    comps = tuple(components) if components is not None else DEFAULT_COMPONENTS
    clone = World()
    entity_map: Dict[int, int] = {}
    relevant_entities: set[int] = set()
    for comp_type in comps:
        for ent, _ in world.get_component(comp_type):
            relevant_entities.add(ent)
    # Creation order is preserved so forces keep their roster order.
    for ent in sorted(relevant_entities):
        entity_map[ent] = clone.create_entity()
    for comp_type in comps:
        for ent, comp in world.get_component(comp_type):
            new_ent = entity_map[ent]
            new_comp = deepcopy(comp)
            if isinstance(new_comp, Force):
                new_comp.squad_entities = [
                    entity_map[s]
                    for s in new_comp.squad_entities
                    if s in entity_map
                ]
            elif isinstance(new_comp, Squad):
                if new_comp.owner_id in entity_map:
                    new_comp.owner_id = entity_map[new_comp.owner_id]
            clone.add_component(new_ent, new_comp)
    return CloneState(world=clone, event_bus=EventBus(), entity_map=entity_map)
