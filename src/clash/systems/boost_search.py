"""Search for the smallest attack boost that lets one force win.

Boosts are tried in increasing order starting at ``BattleConfig.boost_start``.
Each trial fights on a fresh clone of the pristine world, so no damage or
boost carries over between trials. Stalemates and losses both mean "try the
next boost". The search has no upper bound.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from esper import World

from clash.components.battle_outcome import BattleOutcome
from clash.components.force import Force
from clash.components.squads_query import force_by_name
from clash.config import BattleConfig
from clash.events.bus import EventBus, EVENT_BOOST_TRIAL
from clash.simulation import clone_world_state
from clash.systems.battle import BattleSystem, battle_forces
from clash.systems.force_ops import apply_boost

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BoostResult:
    boost: int
    survivors: int
    trials: int


class BoostSearchSystem:
    """Finds the minimum boost for the helped force against a pristine world."""

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

    def search(self, helped_force: Optional[int] = None) -> BoostResult:
        if helped_force is None:
            helped_force = self.helped_force()
        helped_name = self.world.component_for_entity(helped_force, Force).name
        boost = self.config.boost_start
        trials = 0
        while True:
            trials += 1
            outcome = self.run_trial(boost, helped_force)
            self.event_bus.emit(EVENT_BOOST_TRIAL, boost=boost, outcome=outcome, helped=helped_name)
            if self.config.log_boost_trials:
                logger.info(
                    "boost %d: %s (winner=%s, survivors=%d)",
                    boost,
                    outcome.status.name.lower(),
                    outcome.winner,
                    outcome.survivors,
                )
            if outcome.is_decisive() and outcome.winner == helped_name:
                return BoostResult(boost=boost, survivors=outcome.survivors, trials=trials)
            boost += 1

    def run_trial(self, boost: int, helped_force: int) -> BattleOutcome:
        """Fight one battle on a fresh clone with ``boost`` applied to the helped force."""
        state = clone_world_state(self.world)
        apply_boost(state.world, state.entity_map[helped_force], boost)
        battle = BattleSystem(state.world, state.event_bus, config=self.config)
        return battle.run()

    def helped_force(self) -> int:
        """Configured helped force, or the first force of the roster."""
        if self.config.helped_force is None:
            return battle_forces(self.world)[0]
        return force_by_name(self.world, self.config.helped_force)


def find_minimum_boost(
    world: World,
    event_bus: Optional[EventBus] = None,
    config: Optional[BattleConfig] = None,
) -> BoostResult:
    return BoostSearchSystem(world, event_bus or EventBus(), config=config).search()
