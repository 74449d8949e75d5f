from typing import Sequence

from esper import World
from clash.components.battle_outcome import BattleOutcome
from clash.factories.forces import spawn_force
from clash.factories.roster import ArmyDefinition


def create_world(armies: Sequence[ArmyDefinition]) -> World:
    """Build a pristine battle world with one force entity per army, in roster order."""
    world = World()

    # Register the outcome resource before any force so the battle can record into it.
    world.create_entity(BattleOutcome())

    for definition in armies:
        spawn_force(world, definition)
    return world
