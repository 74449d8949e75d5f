"""
Battle loop
-----------
Rounds are fought until one force has no units left (the other wins with
its surviving unit total) or a round passes in which nobody dies. Such a
round would repeat forever, so it ends the battle in a stalemate. There is
no round cap.
"""
from __future__ import annotations

from typing import Optional, Tuple

from esper import World

from clash.components.battle_outcome import BattleOutcome, BattleStatus
from clash.components.force import Force
from clash.components.squads_query import get_forces, get_or_create_outcome
from clash.config import BattleConfig
from clash.events.bus import (
    EventBus,
    EVENT_BATTLE_RESOLVED,
    EVENT_BATTLE_STALEMATE,
    EVENT_ROUND_STARTED,
)
from clash.simulation import clone_world_state
from clash.systems.battle_log_system import BattleLogSystem
from clash.systems.force_ops import total_units
from clash.systems.round_resolution import RoundResolutionSystem


def battle_forces(world: World) -> Tuple[int, int]:
    """Return the two force entities of a world in roster order."""
    forces = get_forces(world)
    if len(forces) != 2:
        raise ValueError(f"A battle needs exactly two forces, found {len(forces)}")
    return forces[0][0], forces[1][0]


class BattleSystem:
    """Drives rounds between two forces until the battle ends."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        config: Optional[BattleConfig] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.config = config or BattleConfig()
        self.rounds = RoundResolutionSystem(world, event_bus)
        if self.config.trace:
            BattleLogSystem(world, event_bus)

    def run(self, first_force: Optional[int] = None, second_force: Optional[int] = None) -> BattleOutcome:
        """Fight to the end, mutating this world's squads, and record the outcome."""
        if first_force is None or second_force is None:
            first_force, second_force = battle_forces(self.world)
        round_number = 0
        while True:
            first_units = total_units(self.world, first_force)
            second_units = total_units(self.world, second_force)
            forces = (first_force, second_force)
            if first_units == 0:
                return self._finish(BattleStatus.SECOND_FORCE_WINS, second_force, second_units, round_number, forces)
            if second_units == 0:
                return self._finish(BattleStatus.FIRST_FORCE_WINS, first_force, first_units, round_number, forces)

            round_number += 1
            self.event_bus.emit(EVENT_ROUND_STARTED, round_number=round_number, forces=forces)
            killed = self.rounds.resolve_round(first_force, second_force, round_number=round_number)
            if killed == 0:
                return self._finish(BattleStatus.STALEMATE, None, 0, round_number, forces)

    def _finish(
        self,
        status: BattleStatus,
        winner_entity: Optional[int],
        survivors: int,
        rounds: int,
        forces: Tuple[int, int],
    ) -> BattleOutcome:
        outcome = get_or_create_outcome(self.world)
        outcome.status = status
        outcome.rounds = rounds
        if winner_entity is None:
            outcome.winner = None
            outcome.survivors = 0
            self.event_bus.emit(EVENT_BATTLE_STALEMATE, rounds=rounds)
            return outcome
        outcome.winner = self.world.component_for_entity(winner_entity, Force).name
        outcome.survivors = survivors
        self.event_bus.emit(
            EVENT_BATTLE_RESOLVED,
            winner_entity=winner_entity,
            winner=outcome.winner,
            survivors=survivors,
            rounds=rounds,
            forces=forces,
        )
        return outcome


def resolve_outcome(world: World, config: Optional[BattleConfig] = None) -> BattleOutcome:
    """Fight a battle on a clone of ``world``, leaving the source world untouched."""
    state = clone_world_state(world)
    return BattleSystem(state.world, state.event_bus, config=config).run()
