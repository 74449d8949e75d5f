from __future__ import annotations

import logging

from esper import World

from clash.components.force import Force
from clash.components.squad import Squad
from clash.components.squads_query import get_squads_for_force
from clash.events.bus import (
    EventBus,
    EVENT_ATTACK_RESOLVED,
    EVENT_BATTLE_RESOLVED,
    EVENT_BATTLE_STALEMATE,
    EVENT_ROUND_STARTED,
    EVENT_TARGET_CONSIDERED,
)

logger = logging.getLogger(__name__)


class BattleLogSystem:
    """Writes a debug trace of a battle to the ``clash.systems.battle_log_system`` logger.

    Per round it logs each force's squad counts, the damage every attacker
    would deal to each candidate target, and every strike with its kills.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_ROUND_STARTED, self.on_round_started)
        self.event_bus.subscribe(EVENT_TARGET_CONSIDERED, self.on_target_considered)
        self.event_bus.subscribe(EVENT_ATTACK_RESOLVED, self.on_attack_resolved)
        self.event_bus.subscribe(EVENT_BATTLE_RESOLVED, self.on_battle_resolved)
        self.event_bus.subscribe(EVENT_BATTLE_STALEMATE, self.on_battle_stalemate)

    def on_round_started(self, sender, **kwargs):
        if not logger.isEnabledFor(logging.DEBUG):
            return
        for force_entity in kwargs.get("forces", ()):
            self._log_group_counts(force_entity)

    def on_target_considered(self, sender, **kwargs):
        logger.debug(
            "%s group %d would deal defending group %d %d damage",
            self._force_name(kwargs["attacking_force"]),
            self._squad_id(kwargs["attacker_entity"]),
            self._squad_id(kwargs["defender_entity"]),
            kwargs["predicted_damage"],
        )

    def on_attack_resolved(self, sender, **kwargs):
        logger.debug(
            "%s group %d attacks defending group %d, killing %d units",
            self._force_name(kwargs["attacking_force"]),
            self._squad_id(kwargs["attacker_entity"]),
            self._squad_id(kwargs["defender_entity"]),
            kwargs["killed"],
        )

    def on_battle_resolved(self, sender, **kwargs):
        if logger.isEnabledFor(logging.DEBUG):
            for force_entity in kwargs.get("forces", ()):
                self._log_group_counts(force_entity)
        logger.debug(
            "%s wins after %d rounds with %d units left",
            kwargs["winner"],
            kwargs["rounds"],
            kwargs["survivors"],
        )

    def on_battle_stalemate(self, sender, **kwargs):
        logger.debug("Stalemate after %d rounds: nobody died", kwargs["rounds"])

    def _log_group_counts(self, force_entity: int) -> None:
        logger.debug("%s:", self._force_name(force_entity))
        squads = get_squads_for_force(self.world, force_entity)
        if not squads:
            logger.debug("No groups remain.")
        for _, squad in squads:
            logger.debug("Group %d contains %d units", squad.id, squad.count)

    def _force_name(self, force_entity: int) -> str:
        return self.world.component_for_entity(force_entity, Force).name

    def _squad_id(self, squad_entity: int) -> int:
        return self.world.component_for_entity(squad_entity, Squad).id
