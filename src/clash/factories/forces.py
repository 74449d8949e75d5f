from __future__ import annotations

from copy import deepcopy

from esper import World

from clash.components.force import Force
from clash.factories.roster import ArmyDefinition


def spawn_force(world: World, definition: ArmyDefinition) -> int:
    """Materialize a force and its squads; the definition itself is left untouched."""
    force_entity = world.create_entity()
    squad_entities: list[int] = []
    for template in definition.squads:
        squad = deepcopy(template)
        squad.owner_id = force_entity
        squad_entities.append(world.create_entity(squad))
    world.add_component(force_entity, Force(name=definition.name, squad_entities=squad_entities))
    return force_entity
